"""Tests for the heap and queue used by the searches."""

import pytest

from py_gridnav.core.structures import FifoQueue, MinHeap


class TestMinHeap:
    """Test MinHeap ordering and decrease-key."""

    @pytest.fixture
    def priorities(self):
        return {}

    @pytest.fixture
    def heap(self, priorities):
        return MinHeap(lambda item: priorities[item])

    def test_extracts_in_priority_order(self, heap, priorities):
        for item, priority in [("a", 5), ("b", 1), ("c", 3), ("d", 4), ("e", 2)]:
            priorities[item] = priority
            heap.insert(item)

        assert [heap.extract_min() for _ in range(5)] == ["b", "e", "c", "d", "a"]
        assert len(heap) == 0

    def test_equal_priorities_pop_in_insertion_order(self, heap, priorities):
        for item in "wxyz":
            priorities[item] = 1
            heap.insert(item)
        assert [heap.extract_min() for _ in range(4)] == list("wxyz")

    def test_decrease_key(self, heap, priorities):
        for item, priority in [("a", 5), ("b", 3), ("c", 4)]:
            priorities[item] = priority
            heap.insert(item)

        priorities["a"] = 1
        heap.insert("a")

        assert len(heap) == 3
        assert heap.peek_min() == "a"
        assert heap.peek_priority() == 1

    def test_increase_key(self, heap, priorities):
        for item, priority in [("a", 1), ("b", 2), ("c", 3)]:
            priorities[item] = priority
            heap.insert(item)

        priorities["a"] = 10
        heap.insert("a")

        assert [heap.extract_min() for _ in range(3)] == ["b", "c", "a"]

    def test_priority_is_stored_on_insert(self, heap, priorities):
        priorities["a"] = 2
        priorities["b"] = 3
        heap.insert("a")
        heap.insert("b")

        priorities["a"] = 100  # not re-inserted, so the heap keeps 2
        assert heap.extract_min() == "a"

    def test_contains(self, heap, priorities):
        priorities["a"] = 1
        heap.insert("a")
        assert "a" in heap
        heap.extract_min()
        assert "a" not in heap

    def test_empty_heap(self, heap):
        assert heap.peek_min() is None
        assert heap.peek_priority() is None
        with pytest.raises(IndexError):
            heap.extract_min()

    def test_many_items_stay_sorted(self):
        values = [(i * 7919) % 1000 for i in range(1000)]
        heap = MinHeap(lambda i: values[i])
        for i in range(len(values)):
            heap.insert(i)
        popped = [values[heap.extract_min()] for _ in range(len(values))]
        assert popped == sorted(values)

    def test_tuple_priorities(self):
        keys = {"a": (5, 2), "b": (5, 1), "c": (4, 9)}
        heap = MinHeap(keys.__getitem__)
        for item in "abc":
            heap.insert(item)
        assert [heap.extract_min() for _ in range(3)] == ["c", "b", "a"]


class TestFifoQueue:
    """Test FifoQueue."""

    def test_first_in_first_out(self):
        queue = FifoQueue()
        for i in range(5):
            queue.enqueue(i)
        assert [queue.dequeue() for _ in range(5)] == [0, 1, 2, 3, 4]
        assert not queue

    def test_interleaved_through_compaction(self):
        queue = FifoQueue()
        expected = []
        out = []
        for i in range(1000):
            queue.enqueue(i)
            expected.append(i)
            if i % 3:
                out.append(queue.dequeue())
        while queue:
            out.append(queue.dequeue())
        assert out == expected

    def test_length_and_peek(self):
        queue = FifoQueue()
        assert queue.peek() is None
        queue.enqueue("a")
        queue.enqueue("b")
        assert len(queue) == 2
        assert queue.peek() == "a"

    def test_dequeue_empty(self):
        with pytest.raises(IndexError):
            FifoQueue().dequeue()
