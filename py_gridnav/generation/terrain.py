"""
Terrain weights from fractal Perlin noise.

Low noise becomes cheap plains and high noise expensive peaks. FBm output
clusters around the middle of [0, 1], so it is contrast stretched before
being mapped onto weights 1 to 10.
"""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import structlog

from ..core.exceptions import ConfigurationError
from ..core.grid import MAX_WEIGHT, MIN_WEIGHT, Coord, Grid, WeightEdit, apply_edits
from ..utils.noise import PerlinNoise
from ..utils.random import Seed
from .base import resolve_endpoints

logger = structlog.get_logger()

_STRETCH_OFFSET = 0.3
_STRETCH_SCALE = 2.85


@dataclass
class TerrainOptions:
    """Noise parameters for terrain generation."""

    frequency: float = 0.12  # lower gives larger features
    octaves: int = 3
    persistence: float = 0.5
    lacunarity: float = 2.0
    intensity: float = 0.7  # exponent on the stretched noise; lower gives more peaks

    def validate(self) -> None:
        if self.frequency <= 0:
            raise ConfigurationError(f"frequency must be > 0, got {self.frequency}")
        if self.octaves < 1:
            raise ConfigurationError(f"octaves must be >= 1, got {self.octaves}")
        if self.persistence <= 0:
            raise ConfigurationError(f"persistence must be > 0, got {self.persistence}")
        if self.lacunarity <= 0:
            raise ConfigurationError(f"lacunarity must be > 0, got {self.lacunarity}")
        if self.intensity <= 0:
            raise ConfigurationError(f"intensity must be > 0, got {self.intensity}")


def noise_to_weights(noise: np.ndarray, intensity: float) -> np.ndarray:
    """Map noise in [0, 1] to integer weights in [1, 10]."""
    stretched = np.clip((noise - _STRETCH_OFFSET) * _STRETCH_SCALE, 0.0, 1.0)
    biased = stretched**intensity
    weights = np.floor(biased * (MAX_WEIGHT - MIN_WEIGHT)).astype(np.int32) + MIN_WEIGHT
    return np.clip(weights, MIN_WEIGHT, MAX_WEIGHT)


def weight_map(rows: int, cols: int, options: TerrainOptions, seed: Optional[Seed] = None) -> np.ndarray:
    """Terrain weight for every cell, sampled at ``(col, row) * frequency``."""
    noise = PerlinNoise(seed)
    row_idx, col_idx = np.mgrid[0:rows, 0:cols]
    values = noise.fbm(
        col_idx * options.frequency,
        row_idx * options.frequency,
        octaves=options.octaves,
        persistence=options.persistence,
        lacunarity=options.lacunarity,
    )
    return noise_to_weights(values, options.intensity)


def generate(
    grid: Grid,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
    *,
    seed: Optional[Seed] = None,
    options: Optional[TerrainOptions] = None,
) -> List[WeightEdit]:
    """
    Generate terrain weight edits.

    Cells are ordered by distance from the grid centre (ties keep row-major
    order); start and finish come last with weight 1. Weight edits clear any
    wall they land on.
    """
    options = options or TerrainOptions()
    options.validate()
    start, finish = resolve_endpoints(grid, start, finish)
    rows, cols = grid.shape

    weights = weight_map(rows, cols, options, seed)

    row_idx, col_idx = np.mgrid[0:rows, 0:cols]
    distance = np.hypot(row_idx - rows // 2, col_idx - cols // 2).ravel()
    order = np.argsort(distance, kind="stable")

    endpoints = {start, finish, grid.start, grid.finish}
    edits: List[WeightEdit] = []
    for flat in order:
        row, col = divmod(int(flat), cols)
        if (row, col) not in endpoints:
            edits.append(WeightEdit(row, col, int(weights[row, col])))
    edits.extend(WeightEdit(row, col, MIN_WEIGHT) for row, col in sorted(endpoints))

    logger.info(
        "Terrain generated",
        rows=rows,
        cols=cols,
        mean_weight=round(float(weights.mean()), 3),
        max_weight=int(weights.max()),
    )
    return edits


def apply_terrain(
    grid: Grid,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
    *,
    seed: Optional[Seed] = None,
    options: Optional[TerrainOptions] = None,
) -> Grid:
    """Generate terrain and return the weighted grid."""
    return apply_edits(grid, generate(grid, start, finish, seed=seed, options=options))
