"""Pathfinding algorithms."""

from .bidirectional import bidirectional_astar, bidirectional_bfs
from .jump_point import jump_point_search
from .registry import ALGORITHMS, AlgorithmType, parse_algorithm, run_algorithm
from .unidirectional import astar, bfs, dfs, dijkstra, greedy_best_first

__all__ = [
    "bfs",
    "dfs",
    "dijkstra",
    "astar",
    "greedy_best_first",
    "bidirectional_bfs",
    "bidirectional_astar",
    "jump_point_search",
    "ALGORITHMS",
    "AlgorithmType",
    "parse_algorithm",
    "run_algorithm",
]
