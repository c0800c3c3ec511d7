# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Protocol

Cell = Tuple[int, int]

class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Cell:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    @classmethod
    def parse(cls, name: str) -> "Direction":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown direction {name!r}") from None

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head first
    direction: Direction
    food: Cell
    alive: bool
    grid_w: int
    grid_h: int
    score: int = 0
    step_count: int = 0
    reason: str | None = None   # "wall" | "self" once dead

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

class Engine(Protocol):
    def reset(self, grid_w: int, grid_h: int) -> Snapshot: ...
    def set_direction(self, requested: Direction | str) -> None: ...
    def step(self) -> Snapshot: ...
    def snapshot(self) -> Snapshot: ...

class SnapshotSink(Protocol):
    """Anything that consumes snapshots after reset/step."""
    def open(self, grid_w: int, grid_h: int) -> None: ...
    def draw(self, snap: Snapshot) -> None: ...
    def close(self) -> None: ...
