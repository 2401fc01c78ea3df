"""
Jump Point Search for 4-connected uniform-cost grids.

Search states are ``(row, col, d_row, d_col)`` where the direction is how
the state was reached, so the same cell can be settled once per arrival
direction. From a state the search jumps straight ahead and to both sides
(never back the way it came) until a jump point is found:

* horizontal jumps stop at finish, or where a vertical neighbor is open
  while the cell behind that neighbor is blocked;
* vertical jumps stop at finish, at the mirrored forced-neighbor condition,
  or where a horizontal probe from the cell finds a jump point;
* walls and the grid boundary end a jump without a jump point.

Costs are Manhattan distances between jump points, so the result costs the
same number of steps as A* on a grid without weights.
"""

from typing import Dict, List, Optional, Set, Tuple, Union

from ..config import WeightPolicy
from ..core.grid import DIRECTIONS, Coord, Grid, manhattan
from ..core.result import SearchResult
from ..core.structures import MinHeap
from .base import check_weight_policy, finish_search, resolve_endpoints

State = Tuple[int, int, int, int]


class _Jumper:
    """Straight-line scans over one grid, with horizontal probes memoised per run."""

    def __init__(self, grid: Grid, finish: Coord):
        self.blocked = grid.walls.tolist()
        self.rows = grid.rows
        self.cols = grid.cols
        self.finish = finish
        self._probes: Dict[Tuple[int, int, int], Optional[Coord]] = {}

    def is_open(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols and not self.blocked[row][col]

    def jump(self, row: int, col: int, d_row: int, d_col: int) -> Optional[Coord]:
        if d_row == 0:
            return self.horizontal(row, col, d_col)
        return self.vertical(row, col, d_row)

    def horizontal(self, row: int, col: int, d_col: int) -> Optional[Coord]:
        key = (row, col, d_col)
        if key in self._probes:
            return self._probes[key]

        result = None
        c = col
        while True:
            c += d_col
            if not self.is_open(row, c):
                break
            if (row, c) == self.finish:
                result = (row, c)
                break
            if any(
                self.is_open(row + d_row, c) and not self.is_open(row + d_row, c - d_col)
                for d_row in (-1, 1)
            ):
                result = (row, c)
                break

        self._probes[key] = result
        return result

    def vertical(self, row: int, col: int, d_row: int) -> Optional[Coord]:
        r = row
        while True:
            r += d_row
            if not self.is_open(r, col):
                return None
            if (r, col) == self.finish:
                return (r, col)
            for d_col in (-1, 1):
                if self.is_open(r, col + d_col) and not self.is_open(r - d_row, col + d_col):
                    return (r, col)
            if self.horizontal(r, col, 1) is not None or self.horizontal(r, col, -1) is not None:
                return (r, col)


def jump_point_search(
    grid: Grid,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
    *,
    weight_policy: Union[WeightPolicy, str, None] = None,
) -> SearchResult:
    """
    Jump Point Search.

    ``visited_order`` lists every cell of each settled straight segment once,
    so it can be replayed cell by cell like the other searches.
    """
    start, finish = resolve_endpoints(grid, start, finish)
    check_weight_policy(grid, weight_policy, "jump_point_search")

    jumper = _Jumper(grid, finish)
    origin: State = (start[0], start[1], 0, 0)
    g_score: Dict[State, int] = {origin: 0}
    came_from: Dict[State, State] = {}
    closed: Set[State] = set()

    def priority(state: State):
        g = g_score[state]
        return (g + manhattan((state[0], state[1]), finish), g)

    heap: MinHeap[State] = MinHeap(priority)
    heap.insert(origin)

    visited_order: List[Coord] = []
    seen: Set[Coord] = set()
    goal: Optional[State] = None

    while heap:
        state = heap.extract_min()
        closed.add(state)
        position = (state[0], state[1])

        parent = came_from.get(state)
        segment = _segment(parent, position) if parent is not None else [position]
        for cell in segment:
            if cell not in seen:
                seen.add(cell)
                visited_order.append(cell)

        if position == finish:
            goal = state
            break

        reverse = (-state[2], -state[3])
        for d_row, d_col in DIRECTIONS:
            if (d_row, d_col) == reverse and state != origin:
                continue
            point = jumper.jump(position[0], position[1], d_row, d_col)
            if point is None:
                continue
            successor: State = (point[0], point[1], d_row, d_col)
            if successor in closed:
                continue
            candidate = g_score[state] + manhattan(position, point)
            if candidate < g_score.get(successor, candidate + 1):
                g_score[successor] = candidate
                came_from[successor] = state
                heap.insert(successor)

    path = _expand_path(came_from, goal) if goal is not None else []
    return finish_search("jump_point_search", grid, visited_order, path)


def _segment(parent: State, position: Coord) -> List[Coord]:
    """Cells after ``parent`` up to and including ``position`` on a straight line."""
    row, col = parent[0], parent[1]
    d_row = (position[0] > row) - (position[0] < row)
    d_col = (position[1] > col) - (position[1] < col)
    cells = []
    while (row, col) != position:
        row += d_row
        col += d_col
        cells.append((row, col))
    return cells


def _expand_path(came_from: Dict[State, State], goal: State) -> List[Coord]:
    """Turn the chain of jump points into a contiguous cell path."""
    chain = [goal]
    while chain[-1] in came_from:
        chain.append(came_from[chain[-1]])
    chain.reverse()

    path: List[Coord] = [(chain[0][0], chain[0][1])]
    for previous, state in zip(chain, chain[1:]):
        path.extend(_segment(previous, (state[0], state[1])))
    return path
