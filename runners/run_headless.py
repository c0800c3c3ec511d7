# runners/run_headless.py
from __future__ import annotations
import random, threading, time
from typing import Any, Dict, List, Optional, Sequence
from config import AppConfig
from core.interfaces import Direction
from core.snake_rules import GameEngine, LockedEngine
from core.session_log import GameLog, make_game_over_logger
from viz.renderer_headless import HeadlessRenderer

def _random_input(engine: LockedEngine, rng: random.Random, period_s: float,
                  stop: threading.Event) -> None:
    # input source on its own thread; the lock serializes it against step()
    dirs = list(Direction)
    while not stop.is_set():
        engine.set_direction(rng.choice(dirs))
        stop.wait(period_s)

def run_headless(
    cfg: AppConfig,
    ticks: int,
    script: Optional[Sequence[Optional[str]]] = None,
    threaded_input: bool = False,
    renderer: Optional[HeadlessRenderer] = None,
    log=None,
) -> List[Dict[str, Any]]:
    """
    Step the engine `ticks` times without a window.

    script: per-tick direction names ("up", ...) or None entries; when absent,
            a random direction is requested before every tick.
    threaded_input: feed random requests from a separate thread and pace
            ticks at cfg.tick_ms (wall clock), guarding the engine with a lock.
    Games that end are logged and restarted. Returns one result per finished game.
    """
    rng = random.Random(cfg.seed)
    core = GameEngine(cfg.grid_w, cfg.grid_h, seed=cfg.seed)
    engine = LockedEngine(core) if threaded_input else core
    renderer = renderer or HeadlessRenderer(cfg.cell_px)
    on_game_over = make_game_over_logger(log, window=cfg.stats_window)

    renderer.open(cfg.grid_w, cfg.grid_h)
    renderer.draw(engine.snapshot())

    stop = threading.Event()
    feeder = None
    if threaded_input:
        feeder = threading.Thread(
            target=_random_input,
            args=(engine, rng, cfg.tick_ms / 3000.0, stop),
            name="HeadlessInput", daemon=True,
        )
        feeder.start()

    results: List[Dict[str, Any]] = []
    try:
        for t in range(ticks):
            if not threaded_input:
                if script is not None:
                    req = script[t] if t < len(script) else None
                    if req is not None:
                        engine.set_direction(req)
                else:
                    engine.set_direction(rng.choice(list(Direction)))
            snap = engine.step()
            renderer.draw(snap)
            if not snap.alive:
                results.append(on_game_over(len(results) + 1, snap))
                renderer.draw(engine.reset(cfg.grid_w, cfg.grid_h))
            if threaded_input:
                time.sleep(cfg.tick_ms / 1000.0)
    finally:
        stop.set()
        if feeder is not None:
            feeder.join(timeout=2.0)
        renderer.close()
    return results


def main(cfg: Optional[AppConfig] = None, ticks: int = 1000, threaded_input: bool = False):
    cfg = cfg or AppConfig()
    log = GameLog(cfg.log_path) if cfg.log_path else None
    try:
        results = run_headless(cfg, ticks, threaded_input=threaded_input, log=log)
    finally:
        if log is not None:
            log.close()
    print(f"[headless] ticks={ticks} games_finished={len(results)} "
          f"best={max((r['score'] for r in results), default=0)}")
    return results
