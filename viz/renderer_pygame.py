# viz/renderer_pygame.py
from __future__ import annotations
import pygame as pg
from typing import Optional
from config import AppConfig
from core.interfaces import Snapshot
import viz.renderer_colors as theme

class PygameRenderer:
    def __init__(self, cfg: AppConfig):
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.cell_px
        self.surf: Optional[pg.Surface] = None
        self._auto_flip = True
        self._overlay_text: Optional[str] = None

    def set_overlay(self, text: Optional[str]) -> None:
        self._overlay_text = text or ""

    def open(self, grid_w: int, grid_h: int) -> None:
        pg.init()
        pg.display.set_caption(self.cfg.title)
        flags = pg.RESIZABLE if self.cfg.resizable else 0
        size = (self.cfg.window_w or grid_w * self.cell,
                self.cfg.window_h or grid_h * self.cell)
        self.surf = pg.display.set_mode(size, flags)
        self._auto_flip = True

    def resize(self, width_px: int, height_px: int) -> None:
        """Follow the window; the grid itself only changes on the next reset."""
        if not self._auto_flip:
            return
        flags = pg.RESIZABLE if self.cfg.resizable else 0
        self.surf = pg.display.set_mode((width_px, height_px), flags)

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        surf = self.surf
        c = self.cell

        surf.fill(theme.BG)

        fx, fy = s.food
        pg.draw.rect(surf, theme.FOOD, pg.Rect(fx * c, fy * c, c, c))

        for (x, y) in s.snake:
            pg.draw.rect(surf, theme.SNAKE, pg.Rect(x * c, y * c, c, c))

        if self.cfg.show_overlay and self._overlay_text:
            font = pg.font.SysFont(None, 28)
            ovr = font.render(self._overlay_text, True, theme.TEXT)
            rect = ovr.get_rect(center=surf.get_rect().center)
            surf.blit(ovr, rect)

        if self._auto_flip:
            pg.display.flip()

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None

    def attach_surface(self, surface: pg.Surface) -> None:
        """Draw onto a caller-owned surface instead of a window."""
        if not pg.get_init():
            pg.init()
        self.surf = surface
        self._auto_flip = False
