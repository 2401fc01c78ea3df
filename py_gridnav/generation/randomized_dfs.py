"""
Randomized depth-first backtracker maze.

Starts from a solid grid and carves a spanning tree over a lattice of cells
two apart, knocking out the wall between each pair it joins.
"""

from typing import Iterator, List, Optional, Tuple

import numpy as np

from ..core.alea_prng import AleaPRNG
from ..core.grid import DIRECTIONS, Coord, Grid, WallEdit
from ..utils.random import Seed, create_prng
from .base import border_cells, build_edits, neighborhood, resolve_endpoints


def carve_passages(rows: int, cols: int, prng: AleaPRNG, border: bool = True) -> np.ndarray:
    """
    Carve the backtracker tree and return the wall mask.

    With ``border`` the lattice is the odd cells inside a one cell frame,
    starting at (1, 1). Without it the lattice is the even cells of the whole
    grid, starting at (0, 0).
    """
    mask = np.ones((rows, cols), dtype=bool)
    low = 1 if border else 0
    row_hi = rows - 2 if border else rows - 1
    col_hi = cols - 2 if border else cols - 1

    def on_lattice(row: int, col: int) -> bool:
        return low <= row <= row_hi and low <= col <= col_hi

    origin = (low, low)
    mask[origin] = False
    stack: List[Tuple[Coord, Iterator[Coord]]] = [(origin, iter(prng.shuffled(DIRECTIONS)))]

    while stack:
        (row, col), directions = stack[-1]
        for dr, dc in directions:
            nr, nc = row + 2 * dr, col + 2 * dc
            if on_lattice(nr, nc) and mask[nr, nc]:
                mask[row + dr, col + dc] = False
                mask[nr, nc] = False
                stack.append(((nr, nc), iter(prng.shuffled(DIRECTIONS))))
                break
        else:
            stack.pop()

    return mask


def generate(
    grid: Grid,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
    *,
    seed: Optional[Seed] = None,
    border: bool = True,
) -> List[WallEdit]:
    """
    Generate a backtracker maze.

    Start, finish and their neighbors are kept open. Walls are revealed frame
    first, then row by row.
    """
    start, finish = resolve_endpoints(grid, start, finish)
    prng = create_prng(seed, "randomized_dfs")
    rows, cols = grid.shape

    mask = carve_passages(rows, cols, prng, border=border)
    for cell in neighborhood((start, finish), grid.shape, border=border):
        mask[cell] = False

    frame = border_cells(rows, cols) if border else []
    framed = set(frame)
    interior = [(r, c) for r in range(rows) for c in range(cols) if (r, c) not in framed]
    return build_edits(grid, mask, frame + interior, start, finish, "randomized_dfs")
