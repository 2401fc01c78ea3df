"""Name based dispatch over the maze generators."""

import inspect
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from ..core.exceptions import ConfigurationError
from ..core.grid import Coord, Grid, WallEdit
from ..utils.random import Seed
from . import cellular_automata, prims, randomized_dfs, recursive_division, spiral


class MazeType(str, Enum):
    RECURSIVE_DIVISION = "recursive_division"
    RANDOMIZED_DFS = "randomized_dfs"
    PRIMS = "prims"
    SPIRAL = "spiral"
    CELLULAR_AUTOMATA = "cellular_automata"


GENERATORS: Dict[MazeType, Callable[..., List[WallEdit]]] = {
    MazeType.RECURSIVE_DIVISION: recursive_division.generate,
    MazeType.RANDOMIZED_DFS: randomized_dfs.generate,
    MazeType.PRIMS: prims.generate,
    MazeType.SPIRAL: spiral.generate,
    MazeType.CELLULAR_AUTOMATA: cellular_automata.generate,
}


def parse_maze(kind: Union[MazeType, str]) -> MazeType:
    try:
        return MazeType(kind)
    except ValueError:
        raise ConfigurationError(
            f"Unknown maze type {kind!r}, expected one of {[m.value for m in MazeType]}"
        ) from None


def generate_maze(
    kind: Union[MazeType, str],
    grid: Grid,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
    *,
    seed: Optional[Seed] = None,
    **params,
) -> List[WallEdit]:
    """
    Run the named generator.

    ``params`` are the generator's own tuning arguments, for example
    ``border`` for randomized_dfs or ``style`` for spiral.

    Raises:
        ConfigurationError: for an unknown name or an unsupported parameter
    """
    maze = parse_maze(kind)
    generator = GENERATORS[maze]
    accepted = set(inspect.signature(generator).parameters) - {"grid", "start", "finish", "seed"}
    unknown = sorted(set(params) - accepted)
    if unknown:
        raise ConfigurationError(f"{maze.value} does not accept {unknown}, expected a subset of {sorted(accepted)}")
    return generator(grid, start, finish, seed=seed, **params)
