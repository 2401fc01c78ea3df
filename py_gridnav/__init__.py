"""
py-gridnav: grid pathfinding with maze and terrain generation.
"""

__version__ = "0.1.0"

from .config import Settings, WeightPolicy, settings
from .core import (
    AlgorithmStats,
    ConfigurationError,
    GenerationInvariantViolated,
    Grid,
    Node,
    RaceRun,
    SearchResult,
    SingleRun,
    WallEdit,
    WeightEdit,
    apply_edits,
)
from .generation import MazeType, TerrainOptions, apply_terrain, generate_maze, generate_terrain
from .search import AlgorithmType, run_algorithm

__all__ = [
    "__version__",
    "Settings",
    "WeightPolicy",
    "settings",
    "AlgorithmStats",
    "ConfigurationError",
    "GenerationInvariantViolated",
    "Grid",
    "Node",
    "RaceRun",
    "SearchResult",
    "SingleRun",
    "WallEdit",
    "WeightEdit",
    "apply_edits",
    "MazeType",
    "TerrainOptions",
    "apply_terrain",
    "generate_maze",
    "generate_terrain",
    "AlgorithmType",
    "run_algorithm",
]
