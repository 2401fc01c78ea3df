"""Shared fixtures for the test suite."""

from collections import deque

import numpy as np
import pytest

from py_gridnav.core.grid import DIRECTIONS, Grid


def build_random_grid(seed, rows=15, cols=20, wall_density=0.3, max_weight=1):
    """Random grid with walls and optional weights; endpoints are always open."""
    rng = np.random.default_rng(seed)
    walls = rng.random((rows, cols)) < wall_density
    weights = rng.integers(1, max_weight + 1, size=(rows, cols)).astype(np.int32)

    cells = rng.choice(rows * cols, size=2, replace=False)
    start = divmod(int(cells[0]), cols)
    finish = divmod(int(cells[1]), cols)
    walls[start] = False
    walls[finish] = False
    return Grid(walls, weights, start, finish)


def reference_distance(grid):
    """Fewest steps from start to finish by plain BFS, or None when unreachable."""
    distance = {grid.start: 0}
    queue = deque([grid.start])
    while queue:
        row, col = queue.popleft()
        if (row, col) == grid.finish:
            return distance[(row, col)]
        for dr, dc in DIRECTIONS:
            nxt = (row + dr, col + dc)
            if grid.is_passable(*nxt) and nxt not in distance:
                distance[nxt] = distance[(row, col)] + 1
                queue.append(nxt)
    return None


def assert_valid_path(grid, path):
    """Path runs start to finish through open, orthogonally adjacent cells."""
    assert path[0] == grid.start
    assert path[-1] == grid.finish
    for row, col in path:
        assert grid.is_passable(row, col)
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1


@pytest.fixture
def random_grid():
    """Factory for seeded random grids."""
    return build_random_grid


@pytest.fixture
def reference_bfs():
    return reference_distance


@pytest.fixture
def path_checker():
    return assert_valid_path


@pytest.fixture
def wall_column_grid():
    """5x5 grid with a wall down column 2 from row 0 to row 3."""
    return Grid.from_strings(
        [
            "S.#..",
            "..#..",
            "..#..",
            "..#..",
            "....F",
        ]
    )


@pytest.fixture
def walled_in_grid():
    """Finish sealed inside a complete ring of walls."""
    return Grid.from_strings(
        [
            "S......",
            ".......",
            "..###..",
            "..#F#..",
            "..###..",
            ".......",
        ]
    )
