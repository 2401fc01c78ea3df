"""Randomized Prim's maze."""

from typing import List, Optional, Set

import numpy as np

from ..core.grid import DIRECTIONS, Coord, Grid, WallEdit
from ..utils.random import Seed, create_prng
from .base import build_edits, neighborhood, odd_limit, resolve_endpoints


def _odd_clamp(value: int, size: int) -> int:
    """Nearest odd index to ``value`` inside a one cell frame."""
    value = min(max(value, 1), odd_limit(size))
    return value if value % 2 == 1 else value - 1


def generate(
    grid: Grid,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
    *,
    seed: Optional[Seed] = None,
) -> List[WallEdit]:
    """
    Grow a maze from the odd cell nearest start.

    Frontier cells sit two steps from the carved region. Each round a random
    frontier cell is joined to one random carved neighbor. Walls are revealed
    in shuffled order.
    """
    start, finish = resolve_endpoints(grid, start, finish)
    prng = create_prng(seed, "prims")
    rows, cols = grid.shape
    row_hi, col_hi = rows - 2, cols - 2

    mask = np.ones((rows, cols), dtype=bool)
    seed_cell = (_odd_clamp(start[0], rows), _odd_clamp(start[1], cols))
    mask[seed_cell] = False

    frontier: List[Coord] = []
    in_frontier: Set[Coord] = set()

    def add_frontier(cell: Coord) -> None:
        for dr, dc in DIRECTIONS:
            nr, nc = cell[0] + 2 * dr, cell[1] + 2 * dc
            if 1 <= nr <= row_hi and 1 <= nc <= col_hi and mask[nr, nc] and (nr, nc) not in in_frontier:
                in_frontier.add((nr, nc))
                frontier.append((nr, nc))

    add_frontier(seed_cell)
    while frontier:
        index = prng.index(len(frontier))
        frontier[index], frontier[-1] = frontier[-1], frontier[index]
        row, col = frontier.pop()

        carved = [
            (dr, dc)
            for dr, dc in DIRECTIONS
            if 1 <= row + 2 * dr <= row_hi and 1 <= col + 2 * dc <= col_hi and not mask[row + 2 * dr, col + 2 * dc]
        ]
        dr, dc = prng.choice(carved)
        mask[row + dr, col + dc] = False
        mask[row, col] = False
        add_frontier((row, col))

    for cell in neighborhood((start, finish), grid.shape, border=True):
        mask[cell] = False

    walls = [(int(r), int(c)) for r, c in zip(*np.nonzero(mask))]
    prng.shuffle(walls)
    return build_edits(grid, mask, walls, start, finish, "prims")
