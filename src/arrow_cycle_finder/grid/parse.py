"""Parsing utilities for arrow grid files."""

from collections.abc import Iterable

from arrow_cycle_finder.errors import ParseError
from arrow_cycle_finder.grid.model import Grid
from arrow_cycle_finder.grid.types import Direction


def parse_dimensions(line: str) -> tuple[int, int]:
    """
    Parse the header line holding "width height".

    Raises ParseError unless the line has exactly two positive integers.
    """
    parts = line.split()
    if len(parts) != 2:
        raise ParseError(f"dimensions line has {len(parts)} elements when it must have 2", 1)

    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError:
        raise ParseError(f"dimensions must be integers, got {line.strip()!r}", 1) from None

    if width <= 0 or height <= 0:
        raise ParseError(f"dimensions must be positive, got {width}x{height}", 1)
    return width, height


def parse_pointer_row(line: str, width: int, line_number: int) -> tuple[Direction, ...]:
    """Parse one row of glyphs, checking it holds exactly `width` pointers."""
    glyphs = line.strip()
    try:
        row = tuple(Direction.from_glyph(ch) for ch in glyphs)
    except ParseError as exc:
        raise ParseError(str(exc), line_number) from None

    if len(row) != width:
        raise ParseError(
            f"line contains {len(row)} pointers when it should contain {width}", line_number
        )
    return row


def load_grid(lines: Iterable[str]) -> Grid:
    """
    Parse a grid from text lines.

    The first line gives the dimensions, each following line one row of
    glyphs. Blank lines after the last row are ignored.
    """
    text_lines = [line.rstrip("\n\r") for line in lines]
    while text_lines and not text_lines[-1].strip():
        text_lines.pop()

    if not text_lines:
        raise ParseError("input is empty; expected a dimensions line", 1)

    width, height = parse_dimensions(text_lines[0])

    pointers = tuple(
        parse_pointer_row(line, width, line_number)
        for line_number, line in enumerate(text_lines[1:], start=2)
    )
    if len(pointers) != height:
        raise ParseError(
            f"file contains {len(pointers)} lines of pointers when it should contain {height}"
        )
    return Grid(width, height, pointers)


def read_grid(path: str) -> Grid:
    """Read and parse a grid file."""
    with open(path, encoding="utf-8") as handle:
        try:
            return load_grid(handle)
        except UnicodeDecodeError as exc:
            raise ParseError(f"input is not valid UTF-8: {exc.reason}") from exc
