"""Search result container."""

from dataclasses import dataclass, field
from typing import List, Sequence

from .grid import Coord, Grid, path_cost


@dataclass(frozen=True)
class SearchResult:
    """
    Output of one search run.

    Attributes:
        algorithm: Registry name of the algorithm that produced the result
        visited_order: Cells in the order the algorithm settled or discovered them
        path: Start to finish inclusive, empty when finish is unreachable
        path_cost: Sum of entry weights along the path, inf when unreachable
    """

    algorithm: str
    visited_order: List[Coord] = field(default_factory=list)
    path: List[Coord] = field(default_factory=list)
    path_cost: float = float("inf")

    @property
    def reachable(self) -> bool:
        return bool(self.path)

    @property
    def path_length(self) -> int:
        """Number of cells on the path, endpoints included."""
        return len(self.path)

    @property
    def visited_count(self) -> int:
        return len(self.visited_order)


def build_result(
    algorithm: str, grid: Grid, visited_order: Sequence[Coord], path: Sequence[Coord]
) -> SearchResult:
    """Assemble a result, pricing the path with the grid's real weights."""
    return SearchResult(
        algorithm=algorithm,
        visited_order=list(visited_order),
        path=list(path),
        path_cost=path_cost(grid, path),
    )
