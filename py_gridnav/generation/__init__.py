"""Maze and terrain generators."""

from .connectivity import ensure_connected, is_connected, open_regions
from .registry import GENERATORS, MazeType, generate_maze, parse_maze
from .terrain import TerrainOptions, apply_terrain
from .terrain import generate as generate_terrain

__all__ = [
    "ensure_connected",
    "is_connected",
    "open_regions",
    "GENERATORS",
    "MazeType",
    "generate_maze",
    "parse_maze",
    "TerrainOptions",
    "apply_terrain",
    "generate_terrain",
]
