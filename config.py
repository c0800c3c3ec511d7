# config.py
from dataclasses import dataclass, replace
from typing import Optional, Tuple

@dataclass(frozen=True, slots=True)
class AppConfig:
    # grid
    grid_w: int = 32
    grid_h: int = 24
    seed: Optional[int] = None

    # timing
    tick_ms: int = 100          # period between engine steps

    # render
    cell_px: int = 20
    title: str = "Snake"
    window_w: Optional[int] = None   # None -> grid_w * cell_px
    window_h: Optional[int] = None   # None -> grid_h * cell_px
    resizable: bool = True
    show_overlay: bool = True

    # session log
    log_path: Optional[str] = None   # CSV, one row per finished game
    stats_window: int = 20

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    def viewport(self) -> Tuple[int, int]:
        w = self.window_w if self.window_w is not None else self.grid_w * self.cell_px
        h = self.window_h if self.window_h is not None else self.grid_h * self.cell_px
        return w, h


def grid_from_viewport(width_px: int, height_px: int, cell_px: int) -> Tuple[int, int]:
    """Number of whole cells that fit the viewport, never less than 1x1."""
    if cell_px <= 0:
        raise ValueError(f"cell_px must be positive, got {cell_px}")
    return max(1, width_px // cell_px), max(1, height_px // cell_px)
