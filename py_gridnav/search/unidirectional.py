"""
Single frontier searches: BFS, DFS, Dijkstra, A* and Greedy Best-First.

Each search owns a fresh SearchScratch and never touches the grid. Edge cost
is the weight of the cell being entered.
"""

from typing import List, Optional, Union

from ..config import WeightPolicy
from ..core.grid import Coord, Grid, manhattan
from ..core.result import SearchResult
from ..core.scratch import SearchScratch, reconstruct_path
from ..core.structures import FifoQueue, MinHeap
from .base import check_weight_policy, finish_search, resolve_endpoints

Policy = Union[WeightPolicy, str, None]


def bfs(
    grid: Grid,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
    *,
    weight_policy: Policy = None,
) -> SearchResult:
    """
    Breadth-first search.

    Cells are recorded when discovered and the search stops as soon as
    finish is discovered, which gives the fewest-steps path.
    """
    start, finish = resolve_endpoints(grid, start, finish)
    check_weight_policy(grid, weight_policy, "bfs")

    scratch = SearchScratch(grid, start)
    queue: FifoQueue[Coord] = FifoQueue()
    scratch.mark_visited(start)
    visited_order: List[Coord] = [start]
    queue.enqueue(start)

    found = False
    while queue and not found:
        current = queue.dequeue()
        for neighbor in grid.neighbors(current):
            if scratch.is_visited(neighbor):
                continue
            scratch.mark_visited(neighbor)
            scratch.set_predecessor(neighbor, current)
            visited_order.append(neighbor)
            if neighbor == finish:
                found = True
                break
            queue.enqueue(neighbor)

    return finish_search("bfs", grid, visited_order, reconstruct_path(scratch, finish))


def dfs(
    grid: Grid,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
    *,
    weight_policy: Policy = None,
) -> SearchResult:
    """
    Depth-first search with an explicit stack.

    Neighbors are pushed in reverse so they are explored up, right, down,
    left. A cell is recorded when popped; stale duplicates are skipped.
    """
    start, finish = resolve_endpoints(grid, start, finish)
    check_weight_policy(grid, weight_policy, "dfs")

    scratch = SearchScratch(grid, start)
    stack: List[Coord] = [start]
    visited_order: List[Coord] = []

    while stack:
        current = stack.pop()
        if scratch.is_visited(current):
            continue
        scratch.mark_visited(current)
        visited_order.append(current)
        if current == finish:
            break
        for neighbor in reversed(grid.neighbors(current)):
            if not scratch.is_visited(neighbor):
                # Last push wins, and the last push is the one popped first
                scratch.set_predecessor(neighbor, current)
                stack.append(neighbor)

    return finish_search("dfs", grid, visited_order, reconstruct_path(scratch, finish))


def dijkstra(grid: Grid, start: Optional[Coord] = None, finish: Optional[Coord] = None) -> SearchResult:
    """Dijkstra's algorithm over cell entry weights."""
    start, finish = resolve_endpoints(grid, start, finish)
    scratch = SearchScratch(grid, start)
    heap: MinHeap[Coord] = MinHeap(scratch.get_distance)
    visited_order = _settle_weighted(grid, scratch, heap, start, finish)
    return finish_search("dijkstra", grid, visited_order, reconstruct_path(scratch, finish))


def astar(grid: Grid, start: Optional[Coord] = None, finish: Optional[Coord] = None) -> SearchResult:
    """
    A* with the Manhattan heuristic.

    Ties on ``f`` go to the lower ``g``, then to the earlier insertion.
    """
    start, finish = resolve_endpoints(grid, start, finish)
    scratch = SearchScratch(grid, start)

    def priority(cell: Coord):
        g = scratch.get_distance(cell)
        return (g + manhattan(cell, finish), g)

    heap: MinHeap[Coord] = MinHeap(priority)
    visited_order = _settle_weighted(grid, scratch, heap, start, finish)
    return finish_search("astar", grid, visited_order, reconstruct_path(scratch, finish))


def greedy_best_first(
    grid: Grid,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
    *,
    weight_policy: Policy = None,
) -> SearchResult:
    """
    Greedy best-first search ranked by Manhattan distance to finish only.

    The first discovery of a cell fixes its predecessor.
    """
    start, finish = resolve_endpoints(grid, start, finish)
    check_weight_policy(grid, weight_policy, "greedy_best_first")

    scratch = SearchScratch(grid, start)
    heap: MinHeap[Coord] = MinHeap(lambda cell: manhattan(cell, finish))
    heap.insert(start)
    visited_order: List[Coord] = []

    while heap:
        current = heap.extract_min()
        scratch.mark_visited(current)
        visited_order.append(current)
        if current == finish:
            break
        for neighbor in grid.neighbors(current):
            if scratch.is_visited(neighbor) or neighbor in heap:
                continue
            scratch.set_predecessor(neighbor, current)
            heap.insert(neighbor)

    return finish_search("greedy_best_first", grid, visited_order, reconstruct_path(scratch, finish))


def _settle_weighted(
    grid: Grid, scratch: SearchScratch, heap: MinHeap, start: Coord, finish: Coord
) -> List[Coord]:
    """Shared Dijkstra/A* loop; the heap's priority function decides which."""
    scratch.set_distance(start, 0.0)
    heap.insert(start)
    visited_order: List[Coord] = []

    while heap:
        current = heap.extract_min()
        scratch.mark_visited(current)
        visited_order.append(current)
        if current == finish:
            break

        distance = scratch.get_distance(current)
        for neighbor in grid.neighbors(current):
            if scratch.is_visited(neighbor):
                continue
            candidate = distance + grid.weight(*neighbor)
            if candidate < scratch.get_distance(neighbor):
                scratch.set_distance(neighbor, candidate)
                scratch.set_predecessor(neighbor, current)
                heap.insert(neighbor)

    return visited_order
