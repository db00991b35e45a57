"""Tests for the toroidal grid model."""

import pytest

from arrow_cycle_finder.grid.model import Grid, step
from arrow_cycle_finder.grid.types import Direction


class TestStep:
    """Test cases for wrap-around stepping."""

    @pytest.mark.parametrize("dimension", [1, 2, 3, 7])
    def test_result_stays_in_range(self, dimension: int) -> None:
        for pos in range(dimension):
            for delta in (-1, 1):
                assert 0 <= step(pos, delta, dimension) < dimension

    @pytest.mark.parametrize("dimension", [1, 2, 5])
    def test_wraps_at_both_edges(self, dimension: int) -> None:
        assert step(0, -1, dimension) == dimension - 1
        assert step(dimension - 1, 1, dimension) == 0

    def test_interior_moves(self) -> None:
        assert step(2, 1, 5) == 3
        assert step(2, -1, 5) == 1

    def test_large_deltas(self) -> None:
        assert step(1, 12, 5) == 3
        assert step(1, -12, 5) == 4

    def test_rejects_non_positive_dimension(self) -> None:
        with pytest.raises(ValueError, match="dimension must be positive"):
            step(0, 1, 0)


class TestGrid:
    """Test cases for Grid construction and neighbour lookup."""

    def test_from_rows(self) -> None:
        grid = Grid.from_rows(["^>", "<v"])
        assert grid.width == 2
        assert grid.height == 2
        assert grid.size == 4
        assert grid.direction_at(1, 0) is Direction.RIGHT
        assert grid.direction_at(0, 1) is Direction.LEFT
        assert grid.glyph_rows() == ["^>", "<v"]

    def test_rejects_ragged_rows(self) -> None:
        pointers = ((Direction.UP, Direction.UP), (Direction.UP,))
        with pytest.raises(ValueError, match="row 1 has 1 pointers, expected 2"):
            Grid(2, 2, pointers)

    def test_rejects_wrong_row_count(self) -> None:
        with pytest.raises(ValueError, match="grid has 1 rows, expected 2"):
            Grid(1, 2, ((Direction.UP,),))

    def test_empty_grid_allowed(self) -> None:
        grid = Grid(0, 0, ())
        assert grid.size == 0
        assert list(grid.coordinates()) == []

    def test_neighbor_of_follows_pointer(self) -> None:
        grid = Grid.from_rows([">v<", "^^^", "vv>"])
        assert grid.neighbor_of(0, 0) == (1, 0)
        assert grid.neighbor_of(1, 0) == (1, 1)
        assert grid.neighbor_of(2, 0) == (1, 0)
        assert grid.neighbor_of(1, 1) == (1, 0)

    def test_neighbor_of_wraps(self) -> None:
        grid = Grid.from_rows(["<^", "v>"])
        assert grid.neighbor_of(0, 0) == (1, 0)
        assert grid.neighbor_of(1, 0) == (1, 1)
        assert grid.neighbor_of(0, 1) == (0, 0)
        assert grid.neighbor_of(1, 1) == (0, 1)

    def test_coordinates_scan_x_outer_y_inner(self) -> None:
        grid = Grid.from_rows([">>>", ">>>"])
        assert list(grid.coordinates()) == [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)]

    def test_contains(self) -> None:
        grid = Grid.from_rows([">>>", ">>>"])
        assert grid.contains(2, 1)
        assert not grid.contains(3, 0)
        assert not grid.contains(0, 2)
        assert not grid.contains(-1, 0)
