"""Cycle detection over the successor function of an arrow grid."""

from collections.abc import Iterator

from arrow_cycle_finder.errors import OutOfBoundsError
from arrow_cycle_finder.grid.model import Grid
from arrow_cycle_finder.grid.types import Coord, Cycle


def trace_from(grid: Grid, x: int, y: int) -> Cycle:
    """
    Find the cycle reached by following pointers from (x, y).

    Every cell has exactly one successor and the grid is finite, so the walk
    always revisits a coordinate within width * height steps. (x, y) need not
    be on the returned cycle; anything walked before entering the cycle is
    dropped.
    """
    if not grid.contains(x, y):
        raise OutOfBoundsError(x, y, grid.width, grid.height)

    # Walk the path, tracking coordinates with their positions in it.
    path_order: dict[Coord, int] = {}
    nodes: Cycle = []
    current = (x, y)

    while current not in path_order:
        path_order[current] = len(nodes)
        nodes.append(grid.node_at(*current))
        current = grid.neighbor_of(*current)

    cycle_start = path_order[current]
    if cycle_start:
        return nodes[cycle_start:]
    return nodes


def iter_longer_cycles(grid: Grid) -> Iterator[tuple[Coord, Cycle]]:
    """
    Trace from every coordinate, yielding (start, cycle) each time a cycle
    strictly longer than all earlier ones is found.

    Coordinates are scanned with x in the outer loop and y in the inner loop,
    so on equal lengths the earlier start wins.
    """
    longest = 0

    for x, y in grid.coordinates():
        cycle = trace_from(grid, x, y)
        if len(cycle) > longest:
            longest = len(cycle)
            yield (x, y), cycle


def max_cycle(grid: Grid) -> Cycle:
    """
    Return the longest cycle in the grid.

    Ties are broken in favour of the cycle found first. Only an empty grid
    yields an empty cycle.
    """
    longest: Cycle = []
    for _start, cycle in iter_longer_cycles(grid):
        longest = cycle
    return longest


def is_closed_cycle(grid: Grid, cycle: Cycle) -> bool:
    """
    Check that `cycle` is a simple cycle of `grid`.

    Each node must match the grid, link to the next node via its pointer, and
    the last node must link back to the first without repeating a coordinate.
    """
    if not cycle:
        return False

    coords = [node.coord for node in cycle]
    if len(set(coords)) != len(coords):
        return False

    for i, node in enumerate(cycle):
        if not grid.contains(node.x, node.y):
            return False
        if grid.direction_at(node.x, node.y) is not node.pointer:
            return False
        if grid.neighbor_of(node.x, node.y) != coords[(i + 1) % len(coords)]:
            return False

    return True
