import numpy as np
import pygame as pg
import pytest
from config import AppConfig
from core.interfaces import Direction, Snapshot
import viz.renderer_colors as theme
from viz.renderer_headless import HeadlessRenderer
from viz.renderer_pygame import PygameRenderer

def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

@pytest.fixture
def snap():
    return Snapshot(
        snake=((3, 2), (2, 2)),
        direction=Direction.RIGHT,
        food=(7, 1),
        alive=True,
        grid_w=10,
        grid_h=5,
    )

def test_pygame_renderer_rejects_config_class():
    with pytest.raises(TypeError):
        PygameRenderer(AppConfig)

def test_pygame_renderer_draws_cells(snap, screen):
    ren = PygameRenderer(AppConfig(cell_px=20))
    ren.attach_surface(screen)
    ren.draw(snap)
    assert _rgb(screen.get_at((3 * 20 + 10, 2 * 20 + 10))) == theme.SNAKE
    assert _rgb(screen.get_at((2 * 20 + 1, 2 * 20 + 1))) == theme.SNAKE
    assert _rgb(screen.get_at((7 * 20 + 5, 1 * 20 + 5))) == theme.FOOD
    assert _rgb(screen.get_at((0, 0))) == theme.BG

def test_pygame_renderer_requires_open(snap):
    ren = PygameRenderer(AppConfig())
    with pytest.raises(AssertionError):
        ren.draw(snap)

def test_headless_frame_shape_and_colors(snap):
    ren = HeadlessRenderer(cell_px=4)
    ren.open(10, 5)
    ren.draw(snap)
    assert ren.frame.shape == (20, 40, 3)
    assert ren.frame.dtype == np.uint8
    assert ren.pixel((3, 2)) == theme.SNAKE
    assert ren.pixel((2, 2)) == theme.SNAKE
    assert ren.pixel((7, 1)) == theme.FOOD
    assert ren.pixel((0, 0)) == theme.BG
    # food cell is a full cell_px square
    assert (ren.frame[4:8, 28:32] == theme.FOOD).all()
    assert ren.frames_drawn == 1

def test_headless_redraw_clears_previous_frame(snap):
    ren = HeadlessRenderer(cell_px=2)
    ren.open(10, 5)
    ren.draw(snap)
    moved = Snapshot(snake=((4, 2), (3, 2)), direction=Direction.RIGHT, food=(7, 1),
                     alive=True, grid_w=10, grid_h=5)
    ren.draw(moved)
    assert ren.pixel((2, 2)) == theme.BG
    assert ren.pixel((4, 2)) == theme.SNAKE

def test_headless_follows_grid_change(snap):
    ren = HeadlessRenderer(cell_px=2)
    ren.open(3, 3)
    ren.draw(snap)
    assert ren.frame.shape == (10, 20, 3)

def test_headless_close():
    ren = HeadlessRenderer()
    ren.open(2, 2)
    ren.close()
    assert ren.frame is None

def test_pygame_window_sized_from_grid():
    ren = PygameRenderer(AppConfig(cell_px=10, resizable=False))
    ren.open(7, 3)
    try:
        assert ren.surf.get_size() == (70, 30)
    finally:
        ren.close()
        pg.init()   # close() quits pygame; the session fixture expects it up
