# viz/keyboard.py
import pygame as pg
from core.interfaces import Direction

KEYMAP = {
    pg.K_UP: Direction.UP,    pg.K_w: Direction.UP,
    pg.K_DOWN: Direction.DOWN,  pg.K_s: Direction.DOWN,
    pg.K_LEFT: Direction.LEFT,  pg.K_a: Direction.LEFT,
    pg.K_RIGHT: Direction.RIGHT, pg.K_d: Direction.RIGHT,
}

class Keyboard:
    def translate(self, e):
        if e.type == pg.QUIT:
            return "quit"
        if e.type == pg.KEYDOWN:
            if e.key == pg.K_ESCAPE: return "quit"
            return KEYMAP.get(e.key)
        return None

    def discard_pending(self, on_resize=None):
        """Drop input queued before the prompt appeared. Resizes still reach
        on_resize; returns 'quit' if the window was closed meanwhile."""
        quit_seen = None
        for e in pg.event.get():
            if e.type == pg.QUIT:
                quit_seen = "quit"
            elif e.type == pg.VIDEORESIZE and on_resize is not None:
                on_resize(e.w, e.h)
        return quit_seen

    def wait_for_ack(self, on_resize=None):
        """Block until any key press; 'quit' if the window was closed instead."""
        while True:
            e = pg.event.wait()
            if e.type == pg.QUIT:
                return "quit"
            if e.type == pg.VIDEORESIZE and on_resize is not None:
                on_resize(e.w, e.h)
            elif e.type == pg.KEYDOWN:
                return "quit" if e.key == pg.K_ESCAPE else "ack"
