"""Shared type definitions for arrow grids."""

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from arrow_cycle_finder.errors import ParseError

Coord: TypeAlias = tuple[int, int]


class Direction(Enum):
    """A pointer from one cell to a neighbouring cell, valued by its glyph."""

    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"

    @classmethod
    def from_glyph(cls, glyph: str) -> "Direction":
        try:
            return cls(glyph)
        except ValueError:
            raise ParseError(f"{glyph!r} is not a recognizable direction") from None

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def delta(self) -> Coord:
        """(dx, dy) for one step; y grows downwards."""
        return _DELTAS[self]


_DELTAS: dict[Direction, Coord] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True, slots=True)
class Node:
    """A single grid position together with the direction stored there."""

    x: int
    y: int
    pointer: Direction

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)


Cycle: TypeAlias = list[Node]
