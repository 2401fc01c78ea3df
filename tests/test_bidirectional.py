"""Tests for bidirectional BFS and bidirectional A*."""

import pytest

from py_gridnav.core.grid import Grid
from py_gridnav.search import bfs, bidirectional_astar, bidirectional_bfs, dijkstra


class TestBidirectionalAStar:
    """Bidirectional A* must always match Dijkstra's cost."""

    @pytest.mark.parametrize("seed", range(60))
    def test_cost_matches_dijkstra(self, seed, random_grid, path_checker):
        # High wall density on some seeds so unreachable grids are covered too
        density = 0.2 if seed % 3 else 0.45
        grid = random_grid(seed, rows=12, cols=16, wall_density=density, max_weight=10)

        expected = dijkstra(grid)
        result = bidirectional_astar(grid)

        assert result.path_cost == expected.path_cost
        assert result.reachable == expected.reachable
        if result.reachable:
            path_checker(grid, result.path)

    def test_unit_weights(self, wall_column_grid, path_checker):
        result = bidirectional_astar(wall_column_grid)
        assert result.path_length == 9
        path_checker(wall_column_grid, result.path)

    def test_asymmetric_weights(self, path_checker):
        # Entering a cell costs its weight, so walking the two routes backwards
        # would price them differently
        grid = Grid.from_strings(
            [
                "S9...",
                ".#.#.",
                ".....",
                ".#.#.",
                "....F",
            ]
        )
        result = bidirectional_astar(grid)
        assert result.path_cost == dijkstra(grid).path_cost
        path_checker(grid, result.path)

    def test_adjacent_endpoints(self):
        grid = Grid.create(5, 5, start=(2, 2), finish=(2, 3))
        result = bidirectional_astar(grid)
        assert result.path == [(2, 2), (2, 3)]

    def test_visited_cells_are_unique(self, random_grid):
        grid = random_grid(11, wall_density=0.2, max_weight=5)
        result = bidirectional_astar(grid)
        assert len(result.visited_order) == len(set(result.visited_order))


class TestBidirectionalBFS:
    """Bidirectional BFS finds a valid path, not necessarily a shortest one."""

    @pytest.mark.parametrize("seed", range(40))
    def test_valid_path_no_shorter_than_bfs(self, seed, random_grid, path_checker):
        grid = random_grid(seed, wall_density=0.3)
        expected = bfs(grid)
        result = bidirectional_bfs(grid)

        assert result.reachable == expected.reachable
        if result.reachable:
            path_checker(grid, result.path)
            assert result.path_length >= expected.path_length

    def test_open_grid_is_optimal(self):
        grid = Grid.create(9, 9, start=(0, 0), finish=(8, 8))
        assert bidirectional_bfs(grid).path_length == 17

    def test_adjacent_endpoints(self):
        grid = Grid.create(5, 5, start=(2, 2), finish=(3, 2))
        assert bidirectional_bfs(grid).path == [(2, 2), (3, 2)]

    def test_visited_order_has_no_duplicates(self, random_grid):
        grid = random_grid(5, wall_density=0.15)
        result = bidirectional_bfs(grid)
        assert result.visited_order[:2] == [grid.start, grid.finish]
        assert len(result.visited_order) == len(set(result.visited_order))
