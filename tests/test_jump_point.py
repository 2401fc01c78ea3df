"""Tests for Jump Point Search."""

import pytest

from py_gridnav.core.grid import Grid, apply_edits
from py_gridnav.generation import MazeType, generate_maze
from py_gridnav.search import astar, jump_point_search


def _check_against_astar(grid, path_checker):
    expected = astar(grid)
    result = jump_point_search(grid)

    assert result.path_cost == expected.path_cost
    assert result.reachable == expected.reachable
    if result.reachable:
        path_checker(grid, result.path)
        assert result.path_length == expected.path_length
    return result


class TestJumpPointSearch:
    """JPS must cost the same as A* on unweighted grids."""

    def test_open_grid(self, path_checker):
        grid = Grid.create(12, 15, start=(0, 0), finish=(11, 14))
        result = _check_against_astar(grid, path_checker)
        assert result.path_length == 26

    def test_wall_column(self, wall_column_grid, path_checker):
        result = _check_against_astar(wall_column_grid, path_checker)
        assert result.path_length == 9

    def test_finish_in_start_row(self, path_checker):
        grid = Grid.create(6, 10, start=(3, 1), finish=(3, 8))
        result = _check_against_astar(grid, path_checker)
        assert result.path == [(3, c) for c in range(1, 9)]

    @pytest.mark.parametrize("seed", range(40))
    def test_random_grids(self, seed, random_grid, path_checker):
        grid = random_grid(seed, rows=14, cols=18, wall_density=0.3)
        _check_against_astar(grid, path_checker)

    @pytest.mark.parametrize("maze", list(MazeType))
    @pytest.mark.parametrize("seed", range(8))
    def test_generated_mazes(self, maze, seed, path_checker):
        grid = Grid.create(21, 31)
        grid = apply_edits(grid, generate_maze(maze, grid, seed=seed))
        result = _check_against_astar(grid, path_checker)
        assert result.reachable

    def test_unreachable(self, walled_in_grid):
        result = jump_point_search(walled_in_grid)
        assert not result.reachable
        assert result.path == []

    def test_visited_order_is_contiguous_playback(self, wall_column_grid):
        result = jump_point_search(wall_column_grid)

        assert result.visited_order[0] == wall_column_grid.start
        assert len(result.visited_order) == len(set(result.visited_order))
        assert set(result.path) <= set(result.visited_order)
        for row, col in result.visited_order:
            assert wall_column_grid.is_passable(row, col)
