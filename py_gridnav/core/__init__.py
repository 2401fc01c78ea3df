"""Core grid model, data structures and shared result types."""

from .exceptions import ConfigurationError, GenerationInvariantViolated
from .grid import (
    DIRECTIONS,
    Coord,
    Edit,
    Grid,
    Node,
    WallEdit,
    WeightEdit,
    apply_edits,
    default_endpoints,
    manhattan,
    path_cost,
)
from .result import SearchResult
from .scratch import SearchScratch, reconstruct_path
from .stats import AlgorithmStats, RaceRun, RunOutcome, SingleRun
from .structures import FifoQueue, MinHeap

__all__ = [
    "ConfigurationError",
    "GenerationInvariantViolated",
    "DIRECTIONS",
    "Coord",
    "Edit",
    "Grid",
    "Node",
    "WallEdit",
    "WeightEdit",
    "apply_edits",
    "default_endpoints",
    "manhattan",
    "path_cost",
    "SearchResult",
    "SearchScratch",
    "reconstruct_path",
    "AlgorithmStats",
    "RaceRun",
    "RunOutcome",
    "SingleRun",
    "FifoQueue",
    "MinHeap",
]
