# viz/renderer_headless.py
from __future__ import annotations
from typing import Optional
import numpy as np
from core.interfaces import Snapshot
import viz.renderer_colors as theme

class HeadlessRenderer:
    """Rasterizes snapshots into an RGB numpy frame instead of a window."""
    def __init__(self, cell_px: int = 20):
        self.cell = cell_px
        self.w = 0
        self.h = 0
        self.frame: Optional[np.ndarray] = None
        self.frames_drawn = 0

    def open(self, grid_w: int, grid_h: int) -> None:
        self.w = grid_w
        self.h = grid_h
        self.frame = np.zeros((grid_h * self.cell, grid_w * self.cell, 3), dtype=np.uint8)
        self.frames_drawn = 0

    def draw(self, snap: Snapshot) -> None:
        assert self.frame is not None, "Renderer not opened"
        if (snap.grid_w, snap.grid_h) != (self.w, self.h):
            self.open(snap.grid_w, snap.grid_h)
        f = self.frame
        c = self.cell
        f[:, :] = theme.BG
        fx, fy = snap.food
        f[fy * c:(fy + 1) * c, fx * c:(fx + 1) * c] = theme.FOOD
        for (x, y) in snap.snake:
            f[y * c:(y + 1) * c, x * c:(x + 1) * c] = theme.SNAKE
        self.frames_drawn += 1

    def pixel(self, cell: tuple[int, int]) -> tuple[int, int, int]:
        """Color at the center of a grid cell in the last frame."""
        assert self.frame is not None, "Renderer not opened"
        x, y = cell
        px = self.frame[y * self.cell + self.cell // 2, x * self.cell + self.cell // 2]
        return tuple(int(v) for v in px)

    def close(self) -> None:
        self.frame = None
