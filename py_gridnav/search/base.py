"""Argument handling and result assembly shared by every search."""

from typing import Optional, Sequence, Tuple, Union

import structlog

from ..config import WeightPolicy, settings
from ..core.exceptions import ConfigurationError
from ..core.grid import Coord, Grid
from ..core.result import SearchResult, build_result

logger = structlog.get_logger()


def resolve_endpoints(grid: Grid, start: Optional[Coord], finish: Optional[Coord]) -> Tuple[Coord, Coord]:
    """
    Fall back to the grid's own endpoints and validate overrides.

    Raises:
        ConfigurationError: if an endpoint is out of bounds, walled, or both
            endpoints are the same cell
    """
    start = grid.start if start is None else grid.require_open(start, "start")
    finish = grid.finish if finish is None else grid.require_open(finish, "finish")
    if start == finish:
        raise ConfigurationError(f"start and finish must differ, both are {start}")
    return start, finish


def resolve_weight_policy(policy: Union[WeightPolicy, str, None]) -> WeightPolicy:
    if policy is None:
        return settings.weight_policy
    try:
        return WeightPolicy(policy)
    except ValueError:
        raise ConfigurationError(
            f"Unknown weight policy {policy!r}, expected one of {[p.value for p in WeightPolicy]}"
        ) from None


def check_weight_policy(grid: Grid, policy: Union[WeightPolicy, str, None], algorithm: str) -> WeightPolicy:
    """
    Apply the weight policy of an algorithm that treats every step as cost 1.

    Raises:
        ConfigurationError: under ``REJECT`` when the grid carries weights
    """
    policy = resolve_weight_policy(policy)
    if policy is WeightPolicy.REJECT and grid.has_weights:
        raise ConfigurationError(f"{algorithm} does not support weighted grids")
    return policy


def finish_search(
    algorithm: str, grid: Grid, visited_order: Sequence[Coord], path: Sequence[Coord]
) -> SearchResult:
    result = build_result(algorithm, grid, visited_order, path)
    logger.debug(
        "Search finished",
        algorithm=algorithm,
        visited=result.visited_count,
        reachable=result.reachable,
        path_length=result.path_length,
        path_cost=result.path_cost,
    )
    return result
