"""
Run statistics for single runs and head-to-head races.

Timing is measured by whoever drives the search; the library only carries
the number it is given.
"""

import math
from dataclasses import dataclass
from typing import Optional, Union

from .result import SearchResult


@dataclass(frozen=True)
class AlgorithmStats:
    """Summary numbers for one search run."""

    algorithm: str
    visited_count: int
    path_length: int
    path_cost: float
    execution_time_ms: Optional[float] = None

    @property
    def found(self) -> bool:
        return self.path_length > 0 and not math.isinf(self.path_cost)

    @classmethod
    def from_result(cls, result: SearchResult, execution_time_ms: Optional[float] = None) -> "AlgorithmStats":
        return cls(
            algorithm=result.algorithm,
            visited_count=result.visited_count,
            path_length=result.path_length,
            path_cost=result.path_cost,
            execution_time_ms=execution_time_ms,
        )

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "visited_count": self.visited_count,
            "path_length": self.path_length,
            "path_cost": None if math.isinf(self.path_cost) else self.path_cost,
            "execution_time_ms": self.execution_time_ms,
        }


@dataclass(frozen=True)
class SingleRun:
    stats: AlgorithmStats
    kind: str = "single"

    def to_dict(self) -> dict:
        return {"kind": self.kind, "stats": self.stats.to_dict()}


@dataclass(frozen=True)
class RaceRun:
    """Two independent runs on the same grid."""

    first: AlgorithmStats
    second: AlgorithmStats
    kind: str = "race"

    @property
    def winner(self) -> str:
        """
        ``"first"``, ``"second"`` or ``"tie"``.

        A found path beats no path, then lower path cost wins, then fewer
        visited cells. Two failed runs tie.
        """
        a, b = self.first, self.second
        if a.found != b.found:
            return "first" if a.found else "second"
        if not a.found:
            return "tie"
        if a.path_cost != b.path_cost:
            return "first" if a.path_cost < b.path_cost else "second"
        if a.visited_count != b.visited_count:
            return "first" if a.visited_count < b.visited_count else "second"
        return "tie"

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "first": self.first.to_dict(),
            "second": self.second.to_dict(),
            "winner": self.winner,
        }


RunOutcome = Union[SingleRun, RaceRun]
