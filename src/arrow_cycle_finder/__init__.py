"""Arrow Cycle Finder - Find the longest cycle in a wrapping grid of arrows."""

from arrow_cycle_finder.solver.solve import main_solve, solve

__all__ = ["solve", "main_solve"]
