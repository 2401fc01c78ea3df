"""
Spiral mazes.

``rings`` draws concentric rectangular walls two cells apart inside a solid
frame, each with one gap whose side rotates top, right, bottom, left.
``corridor`` carves a single clockwise corridor that winds inwards from the
top-left corner.
"""

from typing import List, Optional

import numpy as np

from ..core.exceptions import ConfigurationError
from ..core.grid import Coord, Grid, WallEdit
from ..utils.random import Seed, create_prng
from .base import build_edits, neighborhood, resolve_endpoints

RINGS = "rings"
CORRIDOR = "corridor"

# Clockwise turtle headings: right, down, left, up
_HEADINGS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def ring_cells(rows: int, cols: int) -> List[List[Coord]]:
    """
    Wall cells of each concentric ring, outermost first, gaps already left out.

    Each ring is listed top edge, right edge, bottom edge, left edge.
    """
    rings = []
    top, bottom, left, right = 2, rows - 3, 2, cols - 3
    ring = 0
    while top < bottom - 1 and left < right - 1:
        gap_side = ring % 4
        mid_col = (left + right) // 2
        mid_row = (top + bottom) // 2
        cells = []
        cells.extend((top, c) for c in range(left, right + 1) if not (gap_side == 0 and c == mid_col))
        cells.extend((r, right) for r in range(top + 1, bottom + 1) if not (gap_side == 1 and r == mid_row))
        cells.extend((bottom, c) for c in range(right - 1, left - 1, -1) if not (gap_side == 2 and c == mid_col))
        cells.extend((r, left) for r in range(bottom - 1, top, -1) if not (gap_side == 3 and r == mid_row))
        rings.append(cells)

        top, bottom, left, right = top + 2, bottom - 2, left + 2, right - 2
        ring += 1
    return rings


def carve_corridor(rows: int, cols: int) -> np.ndarray:
    """
    Wall mask of a clockwise spiral corridor one cell wide.

    A turtle starts at (1, 1) heading right and keeps going while the next
    cell is inside the frame and unvisited and the cell after it is not
    carved; otherwise it turns right. It stops when it cannot move after a
    turn.
    """
    mask = np.ones((rows, cols), dtype=bool)

    def inside(row: int, col: int) -> bool:
        return 1 <= row <= rows - 2 and 1 <= col <= cols - 2

    def can_enter(row: int, col: int, d_row: int, d_col: int) -> bool:
        nr, nc = row + d_row, col + d_col
        if not inside(nr, nc) or not mask[nr, nc]:
            return False
        ar, ac = nr + d_row, nc + d_col
        return not (inside(ar, ac) and not mask[ar, ac])

    row, col, heading = 1, 1, 0
    mask[row, col] = False
    while True:
        d_row, d_col = _HEADINGS[heading]
        if not can_enter(row, col, d_row, d_col):
            heading = (heading + 1) % 4
            d_row, d_col = _HEADINGS[heading]
            if not can_enter(row, col, d_row, d_col):
                break
        row, col = row + d_row, col + d_col
        mask[row, col] = False

    return mask


def generate(
    grid: Grid,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
    *,
    seed: Optional[Seed] = None,
    style: str = RINGS,
) -> List[WallEdit]:
    """
    Generate a spiral maze.

    The ring layout does not depend on the seed; the seed only shuffles the
    reveal order of the corridor style. Start, finish and their neighbors
    are never walled.
    """
    if style not in (RINGS, CORRIDOR):
        raise ConfigurationError(f"Unknown spiral style {style!r}, expected {RINGS!r} or {CORRIDOR!r}")

    start, finish = resolve_endpoints(grid, start, finish)
    rows, cols = grid.shape
    protected = neighborhood((start, finish), grid.shape)

    if style == CORRIDOR:
        mask = carve_corridor(rows, cols)
        order = [(int(r), int(c)) for r, c in zip(*np.nonzero(mask))]
        create_prng(seed, "spiral").shuffle(order)
    else:
        mask = np.zeros((rows, cols), dtype=bool)
        order = (
            [(0, c) for c in range(cols)]
            + [(rows - 1, c) for c in range(cols)]
            + [(r, 0) for r in range(1, rows - 1)]
            + [(r, cols - 1) for r in range(1, rows - 1)]
        )
        for ring in ring_cells(rows, cols):
            order.extend(ring)
        order = [cell for cell in order if cell not in protected]
        for cell in order:
            mask[cell] = True

    for cell in protected:
        mask[cell] = False

    return build_edits(grid, mask, order, start, finish, "spiral")
