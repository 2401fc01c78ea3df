"""
Shared plumbing for maze generators.

Every generator builds a bool wall mask, protects the endpoints, repairs
connectivity and turns the mask into an ordered list of WallEdits.
"""

from typing import Iterable, List, Optional, Set, Tuple

import numpy as np
import structlog

from ..core.alea_prng import AleaPRNG
from ..core.exceptions import ConfigurationError
from ..core.grid import DIRECTIONS, Coord, Grid, WallEdit
from .connectivity import MIN_CLEARANCE, ensure_connected

logger = structlog.get_logger()


def resolve_endpoints(grid: Grid, start: Optional[Coord], finish: Optional[Coord]) -> Tuple[Coord, Coord]:
    """
    Endpoints for generation; overrides only need to be in bounds since the
    generator decides which cells are walls.
    """
    resolved = []
    for role, coord, default in (("start", start, grid.start), ("finish", finish, grid.finish)):
        if coord is None:
            resolved.append(default)
            continue
        row, col = int(coord[0]), int(coord[1])
        if not grid.in_bounds(row, col):
            raise ConfigurationError(f"{role} {coord} is outside a {grid.rows}x{grid.cols} grid")
        resolved.append((row, col))
    if resolved[0] == resolved[1]:
        raise ConfigurationError(f"start and finish must differ, both are {resolved[0]}")
    return resolved[0], resolved[1]


def neighborhood(cells: Iterable[Coord], shape: Tuple[int, int], border: bool = False) -> Set[Coord]:
    """
    The given cells plus their orthogonal neighbors.

    With ``border`` the neighbors are limited to the inside of the outer ring.
    """
    rows, cols = shape
    lo_r, hi_r, lo_c, hi_c = (1, rows - 2, 1, cols - 2) if border else (0, rows - 1, 0, cols - 1)
    result = set()
    for row, col in cells:
        result.add((row, col))
        for dr, dc in DIRECTIONS:
            nr, nc = row + dr, col + dc
            if lo_r <= nr <= hi_r and lo_c <= nc <= hi_c:
                result.add((nr, nc))
    return result


def border_cells(rows: int, cols: int) -> List[Coord]:
    """Outer ring in row-major order."""
    return [(r, c) for r in range(rows) for c in range(cols) if r in (0, rows - 1) or c in (0, cols - 1)]


def odd_limit(size: int) -> int:
    """Largest odd index that stays inside a one cell frame."""
    limit = size - 2
    return limit if limit % 2 == 1 else limit - 1


def build_edits(
    grid: Grid,
    mask: np.ndarray,
    reveal_order: Iterable[Coord],
    start: Coord,
    finish: Coord,
    algorithm: str,
    *,
    strategy: str = MIN_CLEARANCE,
    prng: Optional[AleaPRNG] = None,
    border: bool = False,
) -> List[WallEdit]:
    """
    Repair ``mask`` and turn it into edits for ``grid``.

    The list first clears existing walls that the new layout leaves open,
    then sets walls in ``reveal_order``. Cells walled in the mask but
    missing from the order are appended in row-major order.
    """
    mask = mask.copy()
    # The grid's own endpoints can never hold a wall, even when overridden here
    mask[grid.start] = False
    mask[grid.finish] = False
    mask, carved = ensure_connected(mask, start, finish, strategy=strategy, prng=prng, border=border)

    edits: List[WallEdit] = [
        WallEdit(int(r), int(c), False) for r, c in zip(*np.nonzero(grid.walls & ~mask))
    ]

    placed = np.zeros(mask.shape, dtype=bool)
    for row, col in reveal_order:
        if mask[row, col] and not placed[row, col]:
            placed[row, col] = True
            edits.append(WallEdit(row, col, True))
    for r, c in zip(*np.nonzero(mask & ~placed)):
        edits.append(WallEdit(int(r), int(c), True))

    logger.info(
        "Maze generated",
        algorithm=algorithm,
        rows=grid.rows,
        cols=grid.cols,
        walls=int(mask.sum()),
        carved=carved,
    )
    return edits
