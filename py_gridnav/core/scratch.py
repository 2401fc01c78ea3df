"""Per-run search state kept apart from the grid."""

from typing import List, Optional

import numpy as np

from .grid import Coord, Grid


class SearchScratch:
    """
    Visited flags, tentative distances and predecessors for one search.

    Arrays are flat and indexed by ``row * cols + col``. A predecessor of -1
    means none was recorded.
    """

    def __init__(self, grid: Grid, origin: Coord):
        self.rows = grid.rows
        self.cols = grid.cols
        self.origin = origin

        size = self.rows * self.cols
        self.visited = np.zeros(size, dtype=bool)
        self.distance = np.full(size, np.inf, dtype=np.float64)
        self.predecessor = np.full(size, -1, dtype=np.int64)

    def index(self, coord: Coord) -> int:
        return coord[0] * self.cols + coord[1]

    def coord(self, index: int) -> Coord:
        return (index // self.cols, index % self.cols)

    def is_visited(self, coord: Coord) -> bool:
        return bool(self.visited[self.index(coord)])

    def mark_visited(self, coord: Coord) -> None:
        self.visited[self.index(coord)] = True

    def get_distance(self, coord: Coord) -> float:
        return float(self.distance[self.index(coord)])

    def set_distance(self, coord: Coord, value: float) -> None:
        self.distance[self.index(coord)] = value

    def get_predecessor(self, coord: Coord) -> Optional[Coord]:
        prev = int(self.predecessor[self.index(coord)])
        return None if prev < 0 else self.coord(prev)

    def set_predecessor(self, coord: Coord, prev: Coord) -> None:
        self.predecessor[self.index(coord)] = self.index(prev)

    def is_reached(self, coord: Coord) -> bool:
        """True if ``coord`` is the origin or has a recorded predecessor."""
        return coord == self.origin or self.predecessor[self.index(coord)] >= 0


def reconstruct_path(scratch: SearchScratch, finish: Coord) -> List[Coord]:
    """
    Walk predecessors from ``finish`` back to the scratch origin.

    Returns:
        Path from origin to finish inclusive, or [] if finish was never reached
    """
    if not scratch.is_reached(finish):
        return []

    path = [finish]
    current = finish
    # A well formed predecessor chain is acyclic and no longer than the grid
    for _ in range(scratch.rows * scratch.cols):
        if current == scratch.origin:
            path.reverse()
            return path
        prev = scratch.get_predecessor(current)
        if prev is None:
            return []
        path.append(prev)
        current = prev
    return []
