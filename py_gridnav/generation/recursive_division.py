"""
Recursive division maze.

The grid gets a solid frame, then the inside is split by a wall on an even
line with a single gap on an odd line, and each half is split again until
chambers are too small. Walls on even lines and gaps on odd lines can never
cross, so every chamber stays reachable.
"""

from typing import List, Optional

import numpy as np

from ..core.alea_prng import AleaPRNG
from ..core.grid import Coord, Grid, WallEdit
from ..utils.random import Seed, create_prng
from .base import border_cells, build_edits, resolve_endpoints

_MIN_CHAMBER = 3


def generate(
    grid: Grid,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
    *,
    seed: Optional[Seed] = None,
) -> List[WallEdit]:
    """Generate a recursive division maze; walls are revealed frame first, then split by split."""
    start, finish = resolve_endpoints(grid, start, finish)
    prng = create_prng(seed, "recursive_division")
    rows, cols = grid.shape
    protected = {start, finish}

    mask = np.zeros((rows, cols), dtype=bool)
    order: List[Coord] = []

    for cell in border_cells(rows, cols):
        if cell not in protected:
            mask[cell] = True
            order.append(cell)

    # Explicit stack of chambers (top, bottom, left, right), inclusive bounds
    chambers = [(1, rows - 2, 1, cols - 2)]
    while chambers:
        top, bottom, left, right = chambers.pop()
        split = _split(prng, top, bottom, left, right)
        if split is None:
            continue
        horizontal, line, gap = split

        if horizontal:
            wall = [(line, c) for c in range(left, right + 1) if c != gap]
            halves = [(top, line - 1, left, right), (line + 1, bottom, left, right)]
        else:
            wall = [(r, line) for r in range(top, bottom + 1) if r != gap]
            halves = [(top, bottom, left, line - 1), (top, bottom, line + 1, right)]

        for cell in wall:
            if cell not in protected:
                mask[cell] = True
                order.append(cell)

        # First half is divided first
        chambers.append(halves[1])
        chambers.append(halves[0])

    return build_edits(grid, mask, order, start, finish, "recursive_division")


def _split(prng: AleaPRNG, top: int, bottom: int, left: int, right: int):
    """Pick (horizontal, wall line, gap) for a chamber, or None if it cannot be split."""
    height = bottom - top + 1
    width = right - left + 1
    if height < _MIN_CHAMBER or width < _MIN_CHAMBER:
        return None

    if height != width:
        horizontal = height > width
    else:
        horizontal = prng.chance(0.5)

    if horizontal:
        lines = [r for r in range(top + 1, bottom) if r % 2 == 0]
        gaps = [c for c in range(left, right + 1) if c % 2 == 1]
    else:
        lines = [c for c in range(left + 1, right) if c % 2 == 0]
        gaps = [r for r in range(top, bottom + 1) if r % 2 == 1]

    if not lines or not gaps:
        return None
    return horizontal, prng.choice(lines), prng.choice(gaps)
