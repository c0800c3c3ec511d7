from __future__ import annotations
import csv, os
from collections import deque
from typing import Deque, Dict, Any, Optional, Callable
from .interfaces import Snapshot

GAME_KEYS = ["game", "score", "length", "ticks", "reason", "best", "recent_mean"]

class GameLog:
    """Append-only CSV of finished games, one row per game, fixed columns."""
    def __init__(self, path: str):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._file = open(path, "a", newline="")
        self._writer = csv.DictWriter(self._file, fieldnames=GAME_KEYS, extrasaction="ignore")
        if self._file.tell() == 0:
            self._writer.writeheader()

    def write(self, row: Dict[str, Any]) -> None:
        self._writer.writerow(row)
        self._file.flush()

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "GameLog":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class ScoreBoard:
    """Best score of the session and mean over the last `window` games."""
    def __init__(self, window: int = 20):
        self.best = 0
        self.recent: Deque[int] = deque(maxlen=max(1, window))

    def add(self, score: int) -> None:
        self.best = max(self.best, score)
        self.recent.append(score)

    @property
    def recent_mean(self) -> float:
        return sum(self.recent) / len(self.recent) if self.recent else 0.0


def make_game_over_logger(
    log: Optional[GameLog] = None,
    window: int = 20,
    echo: Callable[[str], None] = print,
) -> Callable[[int, Snapshot], Dict[str, Any]]:
    """
    Returns a function(game: int, snap: Snapshot) -> dict called once per
    finished game. Prints a summary line and, if a log is given, appends
    a row to it.
    """
    board = ScoreBoard(window)

    def _on_game_over(game: int, snap: Snapshot) -> Dict[str, Any]:
        board.add(snap.score)
        row = {
            "game": game,
            "score": snap.score,
            "length": snap.length,
            "ticks": snap.step_count,
            "reason": snap.reason,
            "best": board.best,
            "recent_mean": round(board.recent_mean, 3),
        }
        echo(f"[game {game}] score={snap.score} length={snap.length} "
             f"reason={snap.reason} ticks={snap.step_count} best={board.best}")
        if log is not None:
            log.write(row)
        return row

    return _on_game_over
