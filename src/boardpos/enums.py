"""Stepping directions on the board."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """One of the eight single-square steps, valued by its (df, dr) delta."""

    UP = (0, 1)
    DOWN = (0, -1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)
    RIGHT_UP = (1, 1)
    RIGHT_DOWN = (1, -1)
    LEFT_UP = (-1, 1)
    LEFT_DOWN = (-1, -1)

    @property
    def df(self) -> int:
        return self.value[0]

    @property
    def dr(self) -> int:
        return self.value[1]

    @property
    def is_diagonal(self) -> bool:
        return self.df != 0 and self.dr != 0

    @property
    def opposite(self) -> Direction:
        return Direction((-self.df, -self.dr))

    def __str__(self) -> str:
        return self.name.lower()


ORTHOGONAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.RIGHT,
    Direction.LEFT,
)
DIAGONAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.RIGHT_UP,
    Direction.RIGHT_DOWN,
    Direction.LEFT_UP,
    Direction.LEFT_DOWN,
)
ALL_DIRECTIONS: tuple[Direction, ...] = ORTHOGONAL_DIRECTIONS + DIAGONAL_DIRECTIONS
