"""
Frontier data structures for the search algorithms.

MinHeap keeps a position map so re-inserting an item is a decrease-key (or
increase-key) in place. FifoQueue is a list with a moving head.
"""

from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, Tuple, TypeVar

T = TypeVar("T", bound=Hashable)

# FifoQueue only compacts once this many consumed slots have piled up
_COMPACT_MIN = 100


class MinHeap(Generic[T]):
    """
    Binary min-heap keyed by a priority function.

    The priority of an item is computed once on insert and stored, so the
    function may read state that changes later (tentative distances).
    Equal priorities pop in insertion order.
    """

    def __init__(self, priority: Callable[[T], Any]):
        self._priority = priority
        self._heap: List[Tuple[Any, int, T]] = []
        self._positions: Dict[T, int] = {}
        self._seq = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: object) -> bool:
        return item in self._positions

    def insert(self, item: T) -> None:
        """Insert ``item`` or update its priority if already present."""
        entry = (self._priority(item), self._seq, item)
        self._seq += 1

        pos = self._positions.get(item)
        if pos is None:
            self._heap.append(entry)
            pos = len(self._heap) - 1
            self._positions[item] = pos
            self._sift_up(pos)
            return

        self._heap[pos] = entry
        pos = self._sift_up(pos)
        self._sift_down(pos)

    def extract_min(self) -> T:
        """Remove and return the item with the lowest priority."""
        if not self._heap:
            raise IndexError("extract_min from an empty heap")

        top = self._heap[0]
        last = self._heap.pop()
        del self._positions[top[2]]
        if self._heap:
            self._heap[0] = last
            self._positions[last[2]] = 0
            self._sift_down(0)
        return top[2]

    def peek_min(self) -> Optional[T]:
        return self._heap[0][2] if self._heap else None

    def peek_priority(self) -> Optional[Any]:
        """Stored priority of the top item, or None when empty."""
        return self._heap[0][0] if self._heap else None

    def _sift_up(self, pos: int) -> int:
        heap = self._heap
        entry = heap[pos]
        key = entry[:2]
        while pos > 0:
            parent = (pos - 1) >> 1
            if heap[parent][:2] <= key:
                break
            heap[pos] = heap[parent]
            self._positions[heap[pos][2]] = pos
            pos = parent
        heap[pos] = entry
        self._positions[entry[2]] = pos
        return pos

    def _sift_down(self, pos: int) -> int:
        heap = self._heap
        size = len(heap)
        entry = heap[pos]
        key = entry[:2]
        while True:
            child = 2 * pos + 1
            if child >= size:
                break
            right = child + 1
            if right < size and heap[right][:2] < heap[child][:2]:
                child = right
            if key <= heap[child][:2]:
                break
            heap[pos] = heap[child]
            self._positions[heap[pos][2]] = pos
            pos = child
        heap[pos] = entry
        self._positions[entry[2]] = pos
        return pos


class FifoQueue(Generic[T]):
    """First-in first-out queue with amortised O(1) dequeue."""

    def __init__(self):
        self._items: List[T] = []
        self._head = 0

    def __len__(self) -> int:
        return len(self._items) - self._head

    def __bool__(self) -> bool:
        return self._head < len(self._items)

    def enqueue(self, item: T) -> None:
        self._items.append(item)

    def dequeue(self) -> T:
        if self._head >= len(self._items):
            raise IndexError("dequeue from an empty queue")

        item = self._items[self._head]
        self._head += 1
        if self._head > _COMPACT_MIN and self._head * 2 > len(self._items):
            del self._items[: self._head]
            self._head = 0
        return item

    def peek(self) -> Optional[T]:
        return self._items[self._head] if self._head < len(self._items) else None
