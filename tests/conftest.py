# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw tests (no need for display mode)
    return pg.Surface((200, 100))

@pytest.fixture
def engine_factory():
    from core.snake_rules import GameEngine
    def make(w=10, h=10, seed=0, snake=None, food=None, direction=None):
        """Build an engine, optionally forcing body/food/direction."""
        eng = GameEngine(w, h, seed=seed)
        if snake is not None:
            eng.snake = [tuple(c) for c in snake]
        if direction is not None:
            eng.direction = eng.pending = direction
        if food is not None:
            eng.food = tuple(food)
        elif snake is not None:
            eng.place_food()
        return eng
    return make

@pytest.fixture(autouse=True)
def _empty_event_queue():
    pg.event.clear()
    yield
    pg.event.clear()
