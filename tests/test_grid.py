"""Tests for the grid model: positions, directions, bounds and overlap."""

import pytest

from termsnake.grid import Direction, Grid, Position, is_opposite, overlaps, step


class TestDirection:
    def test_opposite_pairs(self):
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.DOWN.opposite is Direction.UP
        assert Direction.LEFT.opposite is Direction.RIGHT
        assert Direction.RIGHT.opposite is Direction.LEFT

    def test_is_opposite_only_for_reversals(self):
        for d in Direction:
            assert is_opposite(d, d.opposite)
            assert not is_opposite(d, d)

    def test_offsets(self):
        assert (Direction.UP.dx, Direction.UP.dy) == (0, -1)
        assert (Direction.DOWN.dx, Direction.DOWN.dy) == (0, 1)
        assert (Direction.LEFT.dx, Direction.LEFT.dy) == (-1, 0)
        assert (Direction.RIGHT.dx, Direction.RIGHT.dy) == (1, 0)


class TestGrid:
    def test_in_bounds_corners(self):
        grid = Grid(25, 20)
        assert grid.in_bounds(Position(0, 0))
        assert grid.in_bounds(Position(24, 19))

    @pytest.mark.parametrize("pos", [(-1, 5), (25, 5), (5, -1), (5, 20)])
    def test_just_outside_is_out_of_bounds(self, pos):
        assert not Grid(25, 20).in_bounds(Position(*pos))

    def test_cells_and_center(self):
        grid = Grid(25, 20)
        assert grid.cells == 500
        assert grid.center() == (12, 10)

    def test_rejects_empty_grid(self):
        with pytest.raises(ValueError):
            Grid(0, 10)


def test_position_equals_plain_tuple():
    assert Position(3, 4) == (3, 4)


def test_overlaps():
    body = [Position(1, 1), Position(2, 1)]
    assert overlaps(Position(2, 1), body)
    assert not overlaps(Position(3, 1), body)
    assert not overlaps(Position(0, 0), [])


def test_step_can_leave_the_grid():
    assert step(Position(0, 5), Direction.LEFT) == (-1, 5)
    assert step(Position(10, 10), Direction.DOWN) == (10, 11)
