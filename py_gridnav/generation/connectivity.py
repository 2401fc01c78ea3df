"""
Reachability checks and repair for generated wall masks.

Masks are bool arrays, True for wall. Reachability is 4-connected, matching
the searches.
"""

from collections import deque
from typing import Optional, Tuple

import numpy as np
import structlog
from scipy import ndimage

from ..core.alea_prng import AleaPRNG
from ..core.exceptions import ConfigurationError, GenerationInvariantViolated
from ..core.grid import DIRECTIONS, Coord

logger = structlog.get_logger()

# 4-connectivity: orthogonal neighbors only
FOUR_CONNECTED = ndimage.generate_binary_structure(2, 1)

MIN_CLEARANCE = "min_clearance"
WINDING = "winding"

_WIDEN_CHANCE = 0.3


def is_connected(mask: np.ndarray, start: Coord, finish: Coord) -> bool:
    """True if start and finish are open and in the same open region."""
    if mask[start] or mask[finish]:
        return False
    labels, _ = ndimage.label(~mask, structure=FOUR_CONNECTED)
    return bool(labels[start] == labels[finish])


def open_regions(mask: np.ndarray) -> int:
    """Number of separate 4-connected open regions."""
    _, count = ndimage.label(~mask, structure=FOUR_CONNECTED)
    return int(count)


def carve_min_clearance(mask: np.ndarray, start: Coord, finish: Coord) -> int:
    """
    Open the path from start to finish that removes the fewest walls.

    0-1 BFS where entering a wall costs 1 and entering an open cell costs 0.
    Modifies ``mask`` in place.

    Returns:
        Number of wall cells cleared
    """
    rows, cols = mask.shape
    cost = np.full(mask.shape, np.iinfo(np.int64).max, dtype=np.int64)
    previous = {}
    cost[start] = 0
    queue = deque([start])

    while queue:
        current = queue.popleft()
        if current == finish:
            break
        base = cost[current]
        for dr, dc in DIRECTIONS:
            nr, nc = current[0] + dr, current[1] + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                continue
            step = 1 if mask[nr, nc] else 0
            if base + step < cost[nr, nc]:
                cost[nr, nc] = base + step
                previous[(nr, nc)] = current
                if step:
                    queue.append((nr, nc))
                else:
                    queue.appendleft((nr, nc))

    carved = 0
    cell: Optional[Coord] = finish
    while cell is not None:
        if mask[cell]:
            mask[cell] = False
            carved += 1
        cell = previous.get(cell)
    return carved


def carve_winding(mask: np.ndarray, start: Coord, finish: Coord, prng: AleaPRNG, border: bool = False) -> int:
    """
    Open a meandering corridor from start to finish.

    Each step moves one cell closer to finish, picking between the vertical
    and horizontal move at random when both close the gap. Some steps also
    open a cell beside the corridor; with ``border`` those never touch the
    outer ring. Modifies ``mask`` in place.

    Returns:
        Number of wall cells cleared
    """
    rows, cols = mask.shape
    row_lo, row_hi, col_lo, col_hi = (1, rows - 2, 1, cols - 2) if border else (0, rows - 1, 0, cols - 1)

    carved = 0
    row, col = start
    if mask[row, col]:
        mask[row, col] = False
        carved += 1

    while (row, col) != finish:
        d_row = (finish[0] > row) - (finish[0] < row)
        d_col = (finish[1] > col) - (finish[1] < col)
        if d_row and d_col:
            vertical = prng.chance(0.5)
        else:
            vertical = bool(d_row)

        if vertical:
            row += d_row
        else:
            col += d_col
        if mask[row, col]:
            mask[row, col] = False
            carved += 1

        if prng.chance(_WIDEN_CHANCE):
            side = 1 if prng.chance(0.5) else -1
            wr, wc = (row, col + side) if vertical else (row + side, col)
            if row_lo <= wr <= row_hi and col_lo <= wc <= col_hi and mask[wr, wc]:
                mask[wr, wc] = False
                carved += 1

    return carved


def ensure_connected(
    mask: np.ndarray,
    start: Coord,
    finish: Coord,
    strategy: str = MIN_CLEARANCE,
    prng: Optional[AleaPRNG] = None,
    border: bool = False,
) -> Tuple[np.ndarray, int]:
    """
    Return a copy of ``mask`` in which finish is reachable from start.

    Raises:
        ConfigurationError: for an unknown strategy, or winding without a PRNG
        GenerationInvariantViolated: if the mask is still disconnected after repair
    """
    mask = mask.copy()
    mask[start] = False
    mask[finish] = False
    if is_connected(mask, start, finish):
        return mask, 0

    if strategy == WINDING:
        if prng is None:
            raise ConfigurationError("winding repair needs a PRNG")
        carved = carve_winding(mask, start, finish, prng, border=border)
    elif strategy == MIN_CLEARANCE:
        carved = carve_min_clearance(mask, start, finish)
    else:
        raise ConfigurationError(f"Unknown repair strategy {strategy!r}")

    if not is_connected(mask, start, finish):
        raise GenerationInvariantViolated(f"start {start} and finish {finish} are still disconnected after repair")

    logger.warning("Connectivity repaired", strategy=strategy, carved=carved, start=start, finish=finish)
    return mask, carved
