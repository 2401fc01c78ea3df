"""
Cave-like layouts from a birth/death cellular automaton.

Cells start as walls with ``initial_wall_chance``. Each generation counts the
walls among the 8 surrounding cells (cells outside the grid count as open):
a wall survives with at least ``death_limit`` wall neighbors and an open cell
becomes a wall with at least ``birth_limit``.
"""

from typing import List, Optional

import numpy as np
from scipy import ndimage

from ..core.exceptions import ConfigurationError
from ..core.grid import Coord, Grid, WallEdit
from ..utils.random import Seed, create_prng
from .base import build_edits, neighborhood, resolve_endpoints
from .connectivity import WINDING

NEIGHBOR_KERNEL = np.array([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=np.int16)


def step(mask: np.ndarray, birth_limit: int, death_limit: int) -> np.ndarray:
    """Advance the automaton by one generation."""
    counts = ndimage.convolve(mask.astype(np.int16), NEIGHBOR_KERNEL, mode="constant", cval=0)
    return np.where(mask, counts >= death_limit, counts >= birth_limit)


def ring_order(rows: int, cols: int) -> List[Coord]:
    """All cells ring by ring from the outside in, each ring clockwise from its top-left corner."""
    order = []
    layer = 0
    while layer * 2 < min(rows, cols):
        top, left = layer, layer
        bottom, right = rows - 1 - layer, cols - 1 - layer
        order.extend((top, c) for c in range(left, right + 1))
        order.extend((r, right) for r in range(top + 1, bottom + 1))
        if bottom > top:
            order.extend((bottom, c) for c in range(right - 1, left - 1, -1))
        if right > left:
            order.extend((r, left) for r in range(bottom - 1, top, -1))
        layer += 1
    return order


def generate(
    grid: Grid,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
    *,
    seed: Optional[Seed] = None,
    initial_wall_chance: float = 0.4,
    birth_limit: int = 4,
    death_limit: int = 4,
    generations: int = 1,
    border: bool = True,
) -> List[WallEdit]:
    """
    Generate a cave layout.

    The frame is added before start and finish are cleared and before the
    winding repair, so the repaired route can never be cut by the frame.

    Raises:
        ConfigurationError: for a wall chance outside [0, 1], negative
            generations or limits outside 0..8
    """
    if not 0.0 <= initial_wall_chance <= 1.0:
        raise ConfigurationError(f"initial_wall_chance must be in [0, 1], got {initial_wall_chance}")
    if generations < 0:
        raise ConfigurationError(f"generations must be >= 0, got {generations}")
    for name, value in (("birth_limit", birth_limit), ("death_limit", death_limit)):
        if not 0 <= value <= 8:
            raise ConfigurationError(f"{name} must be between 0 and 8, got {value}")

    start, finish = resolve_endpoints(grid, start, finish)
    prng = create_prng(seed, "cellular_automata")
    rows, cols = grid.shape

    mask = np.zeros((rows, cols), dtype=bool)
    for r in range(rows):
        for c in range(cols):
            if (r, c) != start and (r, c) != finish:
                mask[r, c] = prng.random() < initial_wall_chance

    for _ in range(generations):
        mask = step(mask, birth_limit, death_limit)

    if border:
        mask[0, :] = True
        mask[-1, :] = True
        mask[:, 0] = True
        mask[:, -1] = True

    for cell in neighborhood((start, finish), grid.shape, border=border):
        mask[cell] = False

    return build_edits(
        grid,
        mask,
        ring_order(rows, cols),
        start,
        finish,
        "cellular_automata",
        strategy=WINDING,
        prng=prng,
        border=border,
    )
