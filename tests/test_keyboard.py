import pygame as pg
import pytest
from core.interfaces import Direction
from viz.keyboard import Keyboard

@pytest.mark.parametrize("key,expected", [
    (pg.K_UP, Direction.UP),
    (pg.K_DOWN, Direction.DOWN),
    (pg.K_LEFT, Direction.LEFT),
    (pg.K_RIGHT, Direction.RIGHT),
    (pg.K_w, Direction.UP),
    (pg.K_d, Direction.RIGHT),
    (pg.K_ESCAPE, "quit"),
    (pg.K_SPACE, None),
])
def test_translate_keys(key, expected):
    assert Keyboard().translate(pg.event.Event(pg.KEYDOWN, key=key)) == expected

def test_translate_quit_and_other_events():
    kbd = Keyboard()
    assert kbd.translate(pg.event.Event(pg.QUIT)) == "quit"
    assert kbd.translate(pg.event.Event(pg.KEYUP, key=pg.K_UP)) is None
    assert kbd.translate(pg.event.Event(pg.MOUSEMOTION, pos=(1, 1))) is None

def _post(*events):
    for e in events:
        pg.event.post(e)

def test_wait_for_ack_any_key():
    _post(pg.event.Event(pg.MOUSEMOTION, pos=(1, 1)), pg.event.Event(pg.KEYDOWN, key=pg.K_SPACE))
    assert Keyboard().wait_for_ack() == "ack"

@pytest.mark.parametrize("event", [
    pg.event.Event(pg.QUIT),
    pg.event.Event(pg.KEYDOWN, key=pg.K_ESCAPE),
])
def test_wait_for_ack_quit(event):
    _post(event)
    assert Keyboard().wait_for_ack() == "quit"

def test_wait_for_ack_forwards_resize():
    seen = []
    _post(pg.event.Event(pg.VIDEORESIZE, w=320, h=200, size=(320, 200)),
          pg.event.Event(pg.KEYDOWN, key=pg.K_RETURN))
    assert Keyboard().wait_for_ack(lambda w, h: seen.append((w, h))) == "ack"
    assert seen == [(320, 200)]

def test_discard_pending_drops_keys_keeps_resize():
    seen = []
    _post(pg.event.Event(pg.KEYDOWN, key=pg.K_UP),
          pg.event.Event(pg.VIDEORESIZE, w=100, h=60, size=(100, 60)))
    assert Keyboard().discard_pending(lambda w, h: seen.append((w, h))) is None
    assert seen == [(100, 60)]
    assert pg.event.peek(pg.KEYDOWN) is False

def test_discard_pending_reports_quit():
    _post(pg.event.Event(pg.KEYDOWN, key=pg.K_LEFT), pg.event.Event(pg.QUIT))
    assert Keyboard().discard_pending() == "quit"
