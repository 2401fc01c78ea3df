"""Command line front-end: build a grid, optionally a maze and terrain, then search it."""

import argparse
import sys
import time
from typing import List, Optional, Sequence, Set

import structlog

from .config import settings
from .core.exceptions import ConfigurationError
from .core.grid import Coord, Grid, apply_edits
from .core.stats import AlgorithmStats, RaceRun, RunOutcome, SingleRun
from .generation.registry import MazeType, generate_maze
from .generation.terrain import TerrainOptions, apply_terrain
from .search.registry import AlgorithmType, run_algorithm
from .utils.logging import configure_logging

logger = structlog.get_logger()

PATH_CHAR = "*"


def render(grid: Grid, path: Sequence[Coord] = (), second_path: Sequence[Coord] = ()) -> List[str]:
    """
    Text rendering of ``grid`` with paths drawn over it.

    The first path is drawn with ``*``, the second with ``+`` and cells on
    both with ``@``.
    """
    first: Set[Coord] = set(path)
    second: Set[Coord] = set(second_path)
    lines = []
    for r, text in enumerate(grid.to_strings()):
        chars = list(text)
        for c, char in enumerate(chars):
            if char in "SF":
                continue
            on_first, on_second = (r, c) in first, (r, c) in second
            if on_first and on_second:
                chars[c] = "@"
            elif on_first:
                chars[c] = PATH_CHAR
            elif on_second:
                chars[c] = "+"
        lines.append("".join(chars))
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="py-gridnav", description="Generate a grid and run a pathfinding algorithm on it")
    parser.add_argument("--rows", type=int, default=settings.default_rows, help="Grid rows")
    parser.add_argument("--cols", type=int, default=settings.default_cols, help="Grid columns")
    parser.add_argument("--maze", choices=[m.value for m in MazeType], help="Maze generator to apply")
    parser.add_argument("--terrain", action="store_true", help="Apply Perlin noise terrain weights")
    parser.add_argument("--seed", default=None, help="Seed for maze and terrain generation")
    parser.add_argument(
        "--algorithm",
        choices=[a.value for a in AlgorithmType],
        default=AlgorithmType.ASTAR.value,
        help="Search algorithm",
    )
    parser.add_argument("--race", choices=[a.value for a in AlgorithmType], help="Second algorithm to race against")
    parser.add_argument("--log-level", default=None, help="Log level (defaults to GRIDNAV_LOG_LEVEL)")
    parser.add_argument("--log-format", choices=["json", "console"], default=None, help="Log renderer")
    return parser


def timed_run(algorithm: str, grid: Grid) -> tuple:
    """Run one search and return (result, stats) with wall-clock timing."""
    started = time.perf_counter()
    result = run_algorithm(algorithm, grid)
    elapsed_ms = (time.perf_counter() - started) * 1000.0
    return result, AlgorithmStats.from_result(result, execution_time_ms=round(elapsed_ms, 3))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.log_format)

    try:
        grid = Grid.create(args.rows, args.cols)
        # Terrain first: weight edits clear walls, wall edits keep open cells' weights
        if args.terrain:
            grid = apply_terrain(grid, seed=args.seed, options=TerrainOptions())
        if args.maze:
            grid = apply_edits(grid, generate_maze(args.maze, grid, seed=args.seed))

        result, stats = timed_run(args.algorithm, grid)
        outcome: RunOutcome
        second_path: Sequence[Coord] = ()
        if args.race:
            second_result, second_stats = timed_run(args.race, grid)
            second_path = second_result.path
            outcome = RaceRun(stats, second_stats)
        else:
            outcome = SingleRun(stats)
    except ConfigurationError as e:
        logger.error("Invalid configuration", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 2

    for line in render(grid, result.path, second_path):
        print(line)
    logger.info("Run complete", **outcome.to_dict())
    return 0
