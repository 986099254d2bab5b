# src/gridmaze/engine/player.py
# Facing directions and the immutable player pose.

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

XY = Tuple[int, int]


class Direction(Enum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def left(self) -> "Direction":
        return _LEFT_OF[self]

    @property
    def right(self) -> "Direction":
        return _RIGHT_OF[self]

    @property
    def forward(self) -> XY:
        return _FORWARD[self]

    @property
    def backward(self) -> XY:
        dx, dy = _FORWARD[self]
        return (-dx, -dy)


# Rotation tables (clockwise for right turns).
_RIGHT_OF = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}
_LEFT_OF = {after: before for before, after in _RIGHT_OF.items()}

_FORWARD = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}


@dataclass(frozen=True)
class Player:
    x: int
    y: int
    direction: Direction = Direction.NORTH

    @classmethod
    def start(cls) -> "Player":
        return cls(1, 1, Direction.NORTH)

    @property
    def position(self) -> XY:
        return (self.x, self.y)

    def facing(self, direction: Direction) -> "Player":
        return replace(self, direction=direction)

    def moved_to(self, x: int, y: int) -> "Player":
        return replace(self, x=x, y=y)
