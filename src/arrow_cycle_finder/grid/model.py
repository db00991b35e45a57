"""Toroidal grid of direction pointers."""

from collections.abc import Iterator
from dataclasses import dataclass

from arrow_cycle_finder.grid.types import Coord, Direction, Node


def step(pos: int, delta: int, dimension: int) -> int:
    """
    Move `pos` by `delta` along an axis of size `dimension`, wrapping at both ends.

    Python's modulo is non-negative for a positive divisor, so stepping left
    from 0 lands on `dimension - 1` and stepping right from the last index
    lands on 0.
    """
    if dimension <= 0:
        raise ValueError(f"dimension must be positive, got {dimension}")
    return (pos + delta) % dimension


@dataclass(frozen=True, slots=True)
class Grid:
    """
    Width, height and the direction table of an arrow grid.

    pointers[y][x] holds the direction at column x of row y.
    """

    width: int
    height: int
    pointers: tuple[tuple[Direction, ...], ...]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"grid dimensions must be non-negative, got {self.width}x{self.height}")
        if len(self.pointers) != self.height:
            raise ValueError(f"grid has {len(self.pointers)} rows, expected {self.height}")
        for y, row in enumerate(self.pointers):
            if len(row) != self.width:
                raise ValueError(f"row {y} has {len(row)} pointers, expected {self.width}")

    @classmethod
    def from_rows(cls, rows: list[str]) -> "Grid":
        """Build a grid from glyph strings, one per row."""
        pointers = tuple(tuple(Direction.from_glyph(ch) for ch in row) for row in rows)
        width = len(pointers[0]) if pointers else 0
        return cls(width, len(pointers), pointers)

    @property
    def size(self) -> int:
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def direction_at(self, x: int, y: int) -> Direction:
        return self.pointers[y][x]

    def node_at(self, x: int, y: int) -> Node:
        return Node(x, y, self.pointers[y][x])

    def neighbor_of(self, x: int, y: int) -> Coord:
        """Follow the pointer stored at (x, y) one cell, wrapping at the edges."""
        dx, dy = self.pointers[y][x].delta
        return step(x, dx, self.width), step(y, dy, self.height)

    def coordinates(self) -> Iterator[Coord]:
        """Yield every coordinate, x in the outer loop and y in the inner loop."""
        for x in range(self.width):
            for y in range(self.height):
                yield x, y

    def glyph_rows(self) -> list[str]:
        return ["".join(d.glyph for d in row) for row in self.pointers]
