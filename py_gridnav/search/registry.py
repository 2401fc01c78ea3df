"""Name based dispatch over the search algorithms."""

from enum import Enum
from typing import Callable, Dict, Optional, Union

from ..core.exceptions import ConfigurationError
from ..core.grid import Coord, Grid
from ..core.result import SearchResult
from .bidirectional import bidirectional_astar, bidirectional_bfs
from .jump_point import jump_point_search
from .unidirectional import astar, bfs, dfs, dijkstra, greedy_best_first


class AlgorithmType(str, Enum):
    BFS = "bfs"
    DFS = "dfs"
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"
    GREEDY_BEST_FIRST = "greedy_best_first"
    BIDIRECTIONAL_BFS = "bidirectional_bfs"
    BIDIRECTIONAL_ASTAR = "bidirectional_astar"
    JUMP_POINT_SEARCH = "jump_point_search"

    @property
    def is_weighted(self) -> bool:
        """True for searches that honour cell weights."""
        return self in (AlgorithmType.DIJKSTRA, AlgorithmType.ASTAR, AlgorithmType.BIDIRECTIONAL_ASTAR)

    @property
    def guarantees_shortest(self) -> bool:
        return self in (
            AlgorithmType.BFS,
            AlgorithmType.DIJKSTRA,
            AlgorithmType.ASTAR,
            AlgorithmType.BIDIRECTIONAL_ASTAR,
            AlgorithmType.JUMP_POINT_SEARCH,
        )


ALGORITHMS: Dict[AlgorithmType, Callable[..., SearchResult]] = {
    AlgorithmType.BFS: bfs,
    AlgorithmType.DFS: dfs,
    AlgorithmType.DIJKSTRA: dijkstra,
    AlgorithmType.ASTAR: astar,
    AlgorithmType.GREEDY_BEST_FIRST: greedy_best_first,
    AlgorithmType.BIDIRECTIONAL_BFS: bidirectional_bfs,
    AlgorithmType.BIDIRECTIONAL_ASTAR: bidirectional_astar,
    AlgorithmType.JUMP_POINT_SEARCH: jump_point_search,
}


def parse_algorithm(kind: Union[AlgorithmType, str]) -> AlgorithmType:
    try:
        return AlgorithmType(kind)
    except ValueError:
        raise ConfigurationError(
            f"Unknown algorithm {kind!r}, expected one of {[a.value for a in AlgorithmType]}"
        ) from None


def run_algorithm(
    kind: Union[AlgorithmType, str],
    grid: Grid,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
    **options,
) -> SearchResult:
    """
    Run the named search.

    ``options`` are passed through; weighted searches take none, the others
    accept ``weight_policy``.
    """
    algorithm = parse_algorithm(kind)
    if algorithm.is_weighted and options:
        raise ConfigurationError(f"{algorithm.value} takes no options, got {sorted(options)}")
    return ALGORITHMS[algorithm](grid, start, finish, **options)
