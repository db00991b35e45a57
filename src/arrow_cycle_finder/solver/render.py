"""Text rendering of a cycle over its grid."""

from arrow_cycle_finder.grid.model import Grid
from arrow_cycle_finder.grid.types import Cycle


def render_cycle(cycle: Cycle, width: int, height: int) -> list[str]:
    """
    Draw the cycle as `height` rows of `width` characters.

    Cells on the cycle show their glyph; every other cell is a space.
    """
    lines = [[" "] * width for _ in range(height)]
    for node in cycle:
        lines[node.y][node.x] = node.pointer.glyph
    return ["".join(line) for line in lines]


def format_result(cycle: Cycle, grid: Grid) -> str:
    rows = render_cycle(cycle, grid.width, grid.height)
    return "\n".join([f"Longest cycle: {len(cycle)}", "Position:", *rows])
