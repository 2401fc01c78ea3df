"""
Searches that grow one frontier from start and another from finish.

Both sides keep their own SearchScratch. The finish side's predecessors point
towards finish, so the final path is the start side's chain up to the meeting
cell followed by the finish side's chain from there.
"""

import math
from typing import List, Optional, Set, Union

from ..config import WeightPolicy
from ..core.grid import Coord, Grid, manhattan
from ..core.result import SearchResult
from ..core.scratch import SearchScratch, reconstruct_path
from ..core.structures import FifoQueue, MinHeap
from .base import check_weight_policy, finish_search, resolve_endpoints


def bidirectional_bfs(
    grid: Grid,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
    *,
    weight_policy: Union[WeightPolicy, str, None] = None,
) -> SearchResult:
    """
    Alternate one BFS expansion per side until a side discovers a cell the
    other side has already visited.

    The first meeting ends the search, so the path is not guaranteed to be
    the shortest one.
    """
    start, finish = resolve_endpoints(grid, start, finish)
    check_weight_policy(grid, weight_policy, "bidirectional_bfs")

    forward = SearchScratch(grid, start)
    backward = SearchScratch(grid, finish)
    forward_queue: FifoQueue[Coord] = FifoQueue()
    backward_queue: FifoQueue[Coord] = FifoQueue()

    forward.mark_visited(start)
    backward.mark_visited(finish)
    forward_queue.enqueue(start)
    backward_queue.enqueue(finish)
    visited_order: List[Coord] = [start, finish]

    meeting: Optional[Coord] = None
    while forward_queue and backward_queue:
        meeting = _expand_bfs(grid, forward_queue, forward, backward, visited_order)
        if meeting is not None:
            break
        meeting = _expand_bfs(grid, backward_queue, backward, forward, visited_order)
        if meeting is not None:
            break

    path = _join(forward, backward, meeting)
    return finish_search("bidirectional_bfs", grid, visited_order, path)


def bidirectional_astar(grid: Grid, start: Optional[Coord] = None, finish: Optional[Coord] = None) -> SearchResult:
    """
    Bidirectional A* over cell entry weights.

    The start side ranks cells by ``g + manhattan(cell, finish)`` and the
    finish side by ``g + manhattan(cell, start)``. ``mu`` tracks the cheapest
    start-to-finish route seen through any cell labelled by both sides, and
    the search stops once ``mu`` is no greater than the smaller top key of
    the two heaps, which makes the result optimal.
    """
    start, finish = resolve_endpoints(grid, start, finish)

    forward = SearchScratch(grid, start)
    backward = SearchScratch(grid, finish)

    def forward_key(cell: Coord):
        g = forward.get_distance(cell)
        return (g + manhattan(cell, finish), g)

    def backward_key(cell: Coord):
        g = backward.get_distance(cell)
        return (g + manhattan(cell, start), g)

    forward_heap: MinHeap[Coord] = MinHeap(forward_key)
    backward_heap: MinHeap[Coord] = MinHeap(backward_key)
    forward.set_distance(start, 0.0)
    backward.set_distance(finish, 0.0)
    forward_heap.insert(start)
    backward_heap.insert(finish)

    visited_order: List[Coord] = []
    seen: Set[Coord] = set()
    mu = math.inf
    meeting: Optional[Coord] = None
    expand_forward = True

    while forward_heap and backward_heap:
        if mu <= min(forward_heap.peek_priority()[0], backward_heap.peek_priority()[0]):
            break

        if expand_forward:
            current = forward_heap.extract_min()
            forward.mark_visited(current)
            distance = forward.get_distance(current)
            for neighbor in grid.neighbors(current):
                if forward.is_visited(neighbor):
                    continue
                candidate = distance + grid.weight(*neighbor)
                if candidate < forward.get_distance(neighbor):
                    forward.set_distance(neighbor, candidate)
                    forward.set_predecessor(neighbor, current)
                    forward_heap.insert(neighbor)
                    through = candidate + backward.get_distance(neighbor)
                    if through < mu:
                        mu, meeting = through, neighbor
        else:
            current = backward_heap.extract_min()
            backward.mark_visited(current)
            # Walking backwards, the step from a neighbor into current costs current's weight
            candidate = backward.get_distance(current) + grid.weight(*current)
            for neighbor in grid.neighbors(current):
                if backward.is_visited(neighbor):
                    continue
                if candidate < backward.get_distance(neighbor):
                    backward.set_distance(neighbor, candidate)
                    backward.set_predecessor(neighbor, current)
                    backward_heap.insert(neighbor)
                    through = candidate + forward.get_distance(neighbor)
                    if through < mu:
                        mu, meeting = through, neighbor

        if current not in seen:
            seen.add(current)
            visited_order.append(current)
        expand_forward = not expand_forward

    path = _join(forward, backward, meeting) if math.isfinite(mu) else []
    return finish_search("bidirectional_astar", grid, visited_order, path)


def _expand_bfs(
    grid: Grid,
    queue: FifoQueue,
    own: SearchScratch,
    other: SearchScratch,
    visited_order: List[Coord],
) -> Optional[Coord]:
    """Expand one cell; return the meeting cell if a neighbor was already seen by ``other``."""
    current = queue.dequeue()
    for neighbor in grid.neighbors(current):
        if own.is_visited(neighbor):
            continue
        own.mark_visited(neighbor)
        own.set_predecessor(neighbor, current)
        if other.is_visited(neighbor):
            return neighbor
        visited_order.append(neighbor)
        queue.enqueue(neighbor)
    return None


def _join(forward: SearchScratch, backward: SearchScratch, meeting: Optional[Coord]) -> List[Coord]:
    if meeting is None:
        return []
    head = reconstruct_path(forward, meeting)
    tail = reconstruct_path(backward, meeting)
    if not head or not tail:
        return []
    tail.reverse()
    return head + tail[1:]
