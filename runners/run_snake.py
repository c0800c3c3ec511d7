# runners/run_snake.py
from __future__ import annotations
from typing import Optional, Tuple
import pygame as pg
from config import AppConfig, grid_from_viewport
from core.interfaces import Direction, Engine, Snapshot
from core.snake_rules import GameEngine
from core.session_log import GameLog, make_game_over_logger
from viz.renderer_pygame import PygameRenderer
from viz.keyboard import Keyboard

TICK_EVENT = pg.USEREVENT + 1
GAME_OVER_TEXT = "Game Over! Press any key to restart."

class PygameTicker:
    """Posts TICK_EVENT into the pygame queue every period_ms; the main loop
    is the only consumer, so steps never overlap."""
    def start(self, period_ms: int) -> None:
        pg.time.set_timer(TICK_EVENT, period_ms)
    def stop(self) -> None:
        pg.time.set_timer(TICK_EVENT, 0)
        pg.event.clear(TICK_EVENT)

class SnakeHost:
    def __init__(self, cfg: AppConfig, engine: Optional[Engine] = None,
                 renderer=None, keyboard=None, ticker=None, log=None):
        self.cfg = cfg
        self.viewport: Tuple[int, int] = cfg.viewport()
        self.engine = engine or GameEngine(*self.grid(), seed=cfg.seed)
        self.renderer = renderer or PygameRenderer(cfg)
        self.keyboard = keyboard or Keyboard()
        self.ticker = ticker or PygameTicker()
        self._on_game_over = make_game_over_logger(log, window=cfg.stats_window)
        self.games = 0
        self.results = []

    def grid(self) -> Tuple[int, int]:
        return grid_from_viewport(*self.viewport, self.cfg.cell_px)

    def on_resize(self, width_px: int, height_px: int) -> None:
        # picked up by the next reset, not mid-game
        self.viewport = (width_px, height_px)
        if hasattr(self.renderer, "resize"):
            self.renderer.resize(width_px, height_px)

    def new_game(self) -> Snapshot:
        snap = self.engine.reset(*self.grid())
        self.renderer.draw(snap)
        self.ticker.start(self.cfg.tick_ms)
        return snap

    def game_over(self, snap: Snapshot) -> bool:
        """Pause, report, wait for acknowledgement, restart. False means quit."""
        self.ticker.stop()
        self.games += 1
        self.results.append(self._on_game_over(self.games, snap))
        if hasattr(self.renderer, "set_overlay"):
            self.renderer.set_overlay(GAME_OVER_TEXT)
            self.renderer.draw(snap)
        # a key pressed in the frame the snake died is not an answer
        ack = self.keyboard.discard_pending(self.on_resize)
        if ack != "quit":
            ack = self.keyboard.wait_for_ack(self.on_resize)
        if hasattr(self.renderer, "set_overlay"):
            self.renderer.set_overlay(None)
        if ack == "quit":
            return False
        self.new_game()
        return True

    def handle_event(self, e) -> bool:
        """Process one pygame event. Returns False when the session should end."""
        if e.type == TICK_EVENT:
            snap = self.engine.step()
            self.renderer.draw(snap)
            if not snap.alive:
                return self.game_over(snap)
            return True
        if e.type == pg.VIDEORESIZE:
            self.on_resize(e.w, e.h)
            return True
        cmd = self.keyboard.translate(e)
        if cmd == "quit":
            return False
        if isinstance(cmd, Direction):
            self.engine.set_direction(cmd)
        return True

    def run(self) -> None:
        w, h = self.grid()
        self.renderer.open(w, h)
        try:
            self.new_game()
            running = True
            while running:
                running = self.handle_event(pg.event.wait())
        finally:
            self.ticker.stop()
            self.renderer.close()


def main(cfg: Optional[AppConfig] = None):
    cfg = cfg or AppConfig()
    log = GameLog(cfg.log_path) if cfg.log_path else None
    try:
        SnakeHost(cfg, log=log).run()
    finally:
        if log is not None:
            log.close()
