# core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
import random
import threading
from typing import List, Optional
from .interfaces import Cell, Direction, Snapshot

class GameEngine:
    """Single snake on a bounded W x H grid, advanced one cell per step().

    Playing -> GameOver is one-way; only reset() starts a new game.
    """
    def __init__(self, grid_w: int, grid_h: int, seed: Optional[int] = None):
        self.rng = random.Random(seed)
        self.reset(grid_w, grid_h)

    def seed(self, seed: Optional[int]):
        self.rng = random.Random(seed)

    def reset(self, grid_w: int, grid_h: int) -> Snapshot:
        if grid_w < 1 or grid_h < 1:
            raise ValueError(f"grid must be at least 1x1, got {grid_w}x{grid_h}")
        self.grid_w, self.grid_h = int(grid_w), int(grid_h)
        self.snake: List[Cell] = [(self.grid_w // 2, self.grid_h // 2)]
        self.direction = Direction.RIGHT
        self.pending = Direction.RIGHT
        self.alive = True
        self.score = 0
        self.step_count = 0
        self.reason: Optional[str] = None
        self.place_food()
        return self.snapshot()

    def set_direction(self, requested: Direction | str) -> None:
        if isinstance(requested, str):
            requested = Direction.parse(requested)
        dx, dy = requested.delta
        cdx, cdy = self.direction.delta
        # only turns across the current axis; reversal and same-axis are ignored
        if (cdx != 0 and dx == 0) or (cdy != 0 and dy == 0):
            self.pending = requested

    def step(self) -> Snapshot:
        if not self.alive:
            return self.snapshot()

        self.direction = self.pending
        hx, hy = self.snake[0]
        dx, dy = self.direction.delta
        new_head = (hx + dx, hy + dy)

        # collisions
        if not (0 <= new_head[0] < self.grid_w and 0 <= new_head[1] < self.grid_h):
            self.alive, self.reason = False, "wall"
            return self.snapshot()
        # tail cell still counts: the body is checked before it moves
        if new_head in self.snake:
            self.alive, self.reason = False, "self"
            return self.snapshot()

        self.step_count += 1
        self.snake.insert(0, new_head)
        if new_head == self.food:
            self.score += 1
            self.place_food()
        else:
            self.snake.pop()
        return self.snapshot()

    def place_food(self) -> Cell:
        # rejection sampling; never returns if the snake fills the grid
        occ = set(self.snake)
        while True:
            cell = (self.rng.randrange(self.grid_w), self.rng.randrange(self.grid_h))
            if cell not in occ:
                self.food = cell
                return cell

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            direction=self.direction,
            food=self.food,
            alive=self.alive,
            grid_w=self.grid_w,
            grid_h=self.grid_h,
            score=self.score,
            step_count=self.step_count,
            reason=self.reason,
        )


class LockedEngine:
    """GameEngine behind one exclusive lock, for hosts that tick and read
    input on different threads."""
    def __init__(self, engine: GameEngine):
        self._engine = engine
        self._lock = threading.Lock()

    def reset(self, grid_w: int, grid_h: int) -> Snapshot:
        with self._lock:
            return self._engine.reset(grid_w, grid_h)

    def set_direction(self, requested: Direction | str) -> None:
        with self._lock:
            self._engine.set_direction(requested)

    def step(self) -> Snapshot:
        with self._lock:
            return self._engine.step()

    def snapshot(self) -> Snapshot:
        with self._lock:
            return self._engine.snapshot()
