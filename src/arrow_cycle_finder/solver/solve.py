import logging
import time
from dataclasses import dataclass
from pathlib import Path

from arrow_cycle_finder.grid.cycle import is_closed_cycle, iter_longer_cycles
from arrow_cycle_finder.grid.model import Grid
from arrow_cycle_finder.grid.parse import read_grid
from arrow_cycle_finder.grid.types import Cycle
from arrow_cycle_finder.solver.render import format_result

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SolveResult:
    """The loaded grid and the longest cycle found in it."""

    grid: Grid
    cycle: Cycle

    @property
    def length(self) -> int:
        return len(self.cycle)


def solve(input_path: str) -> SolveResult:
    """
    Find the longest cycle in the arrow grid stored at `input_path`.

    1. Load and validate the grid
    2. Trace from every cell, keeping the longest cycle

    ParseError and OSError propagate to the caller.
    """
    total_start = time.perf_counter()
    input_file = Path(input_path)

    logger.info("Starting: file=%s", input_file.name)

    t1_start = time.perf_counter()
    grid = read_grid(str(input_file))
    t1 = time.perf_counter() - t1_start
    logger.info("Loaded %dx%d grid (%d cells) in %.3fs", grid.width, grid.height, grid.size, t1)

    t2_start = time.perf_counter()
    cycle: Cycle = []
    for (x, y), candidate in iter_longer_cycles(grid):
        cycle = candidate
        logger.debug("New best: start=(%d, %d), length=%d", x, y, len(cycle))
    t2 = time.perf_counter() - t2_start
    logger.info("Search done: %d start positions traced in %.3fs", grid.size, t2)

    if cycle:
        start = cycle[0]
        logger.debug("Longest cycle enters at (%d, %d)", start.x, start.y)
        logger.debug("Closure check: %s", "ok" if is_closed_cycle(grid, cycle) else "FAILED")

    total_time = time.perf_counter() - total_start
    logger.info("Result: cycle length %d (total %.3fs)", len(cycle), total_time)
    return SolveResult(grid, cycle)


def main_solve(input_path: str) -> None:
    """Main entry point that prints result to stdout."""
    result = solve(input_path)
    print(format_result(result.cycle, result.grid))
