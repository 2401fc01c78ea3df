"""Tests for the grid model and edits."""

import numpy as np
import pytest

from py_gridnav.core.exceptions import ConfigurationError
from py_gridnav.core.grid import (
    Grid,
    Node,
    WallEdit,
    WeightEdit,
    apply_edits,
    default_endpoints,
    manhattan,
    path_cost,
)


class TestGridConstruction:
    """Test grid constructors and validation."""

    def test_create_defaults(self):
        """Test an open grid gets the default endpoints."""
        grid = Grid.create(10, 15)

        assert grid.shape == (10, 15)
        assert grid.start == (1, 1)
        assert grid.finish == (5, 7)
        assert not grid.walls.any()
        assert (grid.weights == 1).all()

    def test_default_endpoints_on_smallest_grid(self):
        start, finish = default_endpoints(5, 5)
        assert start == (1, 1)
        assert finish == (2, 2)
        assert start != finish

    def test_arrays_are_read_only(self):
        grid = Grid.create(6, 6)
        with pytest.raises(ValueError):
            grid.walls[0, 0] = True

    def test_from_strings(self):
        grid = Grid.from_strings(["S....", ".#3..", ".....", "..0..", "....F"])

        assert grid.start == (0, 0)
        assert grid.finish == (4, 4)
        assert grid.is_wall(1, 1)
        assert grid.weight(1, 2) == 3
        assert grid.weight(3, 2) == 10
        assert grid.has_weights

    def test_to_strings_inverts_from_strings(self):
        layout = ["S....", ".#3..", ".....", "..9..", "....F"]
        assert Grid.from_strings(layout).to_strings() == layout

    def test_from_nodes(self):
        nodes = [[Node(r, c) for c in range(5)] for r in range(5)]
        nodes[0][0] = Node(0, 0, is_start=True)
        nodes[4][4] = Node(4, 4, is_finish=True)
        nodes[2][2] = Node(2, 2, is_wall=True)
        nodes[1][3] = Node(1, 3, weight=7)

        grid = Grid.from_nodes(nodes)

        assert grid.start == (0, 0)
        assert grid.finish == (4, 4)
        assert grid.node(2, 2).is_wall
        assert grid.node(1, 3).weight == 7
        assert grid.node(0, 0).is_start

    def test_nodes_round_trip(self):
        grid = Grid.from_strings(["S....", ".#3..", ".....", "..0..", "....F"])
        nodes = grid.nodes()

        assert len(nodes) == 5 and all(len(row) == 5 for row in nodes)
        assert nodes[1][1].is_wall
        assert nodes[3][2].weight == 10
        assert nodes[4][4].is_finish
        assert (nodes[2][3].row, nodes[2][3].col) == (2, 3)
        assert Grid.from_nodes(nodes) == grid

    @pytest.mark.parametrize(
        "layout",
        [
            ["S...", "....", "....", "....", "...F"],  # too narrow
            ["S....", "....", ".....", ".....", "....F"],  # ragged
            [".....", ".....", ".....", ".....", "....F"],  # no start
            ["S...S", ".....", ".....", ".....", "....F"],  # two starts
            ["S....", ".....", ".....", ".....", "....."],  # no finish
            ["S....", ".....", "..x..", ".....", "....F"],  # unknown char
        ],
    )
    def test_invalid_layouts(self, layout):
        with pytest.raises(ConfigurationError):
            Grid.from_strings(layout)

    def test_walled_endpoint_rejected(self):
        walls = np.zeros((5, 5), dtype=bool)
        walls[0, 0] = True
        with pytest.raises(ConfigurationError):
            Grid(walls, np.ones((5, 5)), (0, 0), (4, 4))

    def test_same_endpoints_rejected(self):
        with pytest.raises(ConfigurationError):
            Grid.create(5, 5, start=(2, 2), finish=(2, 2))

    def test_weight_below_one_rejected(self):
        weights = np.ones((5, 5))
        weights[3, 3] = 0
        with pytest.raises(ConfigurationError):
            Grid(np.zeros((5, 5), dtype=bool), weights, (0, 0), (4, 4))

    def test_dimension_limits(self):
        with pytest.raises(ConfigurationError):
            Grid.create(4, 10)
        with pytest.raises(ConfigurationError):
            Grid.create(10, 501)

    def test_node_coordinates_must_match(self):
        nodes = [[Node(r, c) for c in range(5)] for r in range(5)]
        nodes[0][0] = Node(0, 0, is_start=True)
        nodes[4][4] = Node(4, 4, is_finish=True)
        nodes[1][1] = Node(3, 3)
        with pytest.raises(ConfigurationError):
            Grid.from_nodes(nodes)


class TestNeighbors:
    """Test neighbor enumeration."""

    def test_order_is_up_right_down_left(self):
        grid = Grid.create(5, 5)
        assert grid.neighbors((2, 2)) == [(1, 2), (2, 3), (3, 2), (2, 1)]

    def test_walls_and_bounds_excluded(self):
        grid = Grid.from_strings(["S#...", "#....", ".....", ".....", "....F"])
        assert grid.neighbors((0, 0)) == []
        assert grid.neighbors((4, 4)) == [(3, 4), (4, 3)]

    def test_manhattan(self):
        assert manhattan((0, 0), (3, 4)) == 7
        assert manhattan((5, 2), (1, 2)) == 4


class TestEdits:
    """Test applying wall and weight edits."""

    @pytest.fixture
    def grid(self):
        return Grid.create(6, 6, start=(0, 0), finish=(5, 5))

    def test_edits_return_new_grid(self, grid):
        edited = apply_edits(grid, [WallEdit(2, 2), WeightEdit(3, 3, 5)])

        assert edited.is_wall(2, 2)
        assert edited.weight(3, 3) == 5
        assert not grid.is_wall(2, 2)
        assert grid.weight(3, 3) == 1

    def test_wall_resets_weight(self, grid):
        weighted = apply_edits(grid, [WeightEdit(2, 2, 8)])
        walled = apply_edits(weighted, [WallEdit(2, 2, True)])
        assert walled.is_wall(2, 2)
        assert walled.weight(2, 2) == 1

    def test_weight_clears_wall(self, grid):
        walled = apply_edits(grid, [WallEdit(2, 2)])
        weighted = apply_edits(walled, [WeightEdit(2, 2, 4)])
        assert not weighted.is_wall(2, 2)
        assert weighted.weight(2, 2) == 4

    def test_cannot_wall_endpoint(self, grid):
        with pytest.raises(ConfigurationError):
            apply_edits(grid, [WallEdit(0, 0)])

    def test_edits_are_all_or_nothing(self, grid):
        with pytest.raises(ConfigurationError):
            apply_edits(grid, [WallEdit(1, 1), WeightEdit(9, 9, 2)])
        assert not grid.is_wall(1, 1)

    def test_invalid_weight(self, grid):
        with pytest.raises(ConfigurationError):
            apply_edits(grid, [WeightEdit(1, 1, 0)])

    def test_clear_walls(self, grid):
        edited = apply_edits(grid, [WallEdit(1, 1), WeightEdit(2, 2, 6)])
        cleared = edited.clear_walls()
        assert not cleared.walls.any()
        assert (cleared.weights == 1).all()
        assert cleared.start == grid.start


class TestPathCost:
    def test_start_cell_is_free(self):
        grid = Grid.from_strings(["S2...", ".....", ".....", ".....", "....F"])
        assert path_cost(grid, [(0, 0), (0, 1), (0, 2)]) == 3.0

    def test_empty_path_is_infinite(self):
        assert path_cost(Grid.create(5, 5), []) == float("inf")
