import unittest

from heaps import (
    CappedHeap, CappedMaxHeap, CappedMaxPrioQueue, CappedMinHeap,
    CappedMinPrioQueue, EmptyHeapError, HeapFullError, MaxPrioQueue,
    MinPrioQueue,
)
from heapcheck import is_heap_ordered


class TestPrioQueue(unittest.TestCase):
    def test_push_pop(self):
        queue = MinPrioQueue()
        queue.push(3, "c")
        queue.push(1, "a")
        queue.push(2, "b")
        self.assertEqual(queue.peek(), (1, "a"))
        self.assertEqual([queue.pop()[1] for _ in range(3)], ["a", "b", "c"])
        self.assertRaises(EmptyHeapError, queue.pop)

    def test_items_are_never_compared(self):
        queue = MaxPrioQueue()
        for _ in range(5):
            queue.push(1, object())
        self.assertEqual(len(queue), 5)
        self.assertEqual(list(queue.keys()), [1] * 5)

    def test_keys_values_index(self):
        queue = MaxPrioQueue([(1, "a"), (5, "e"), (3, "c")])
        self.assertEqual(queue[0], (5, "e"))
        self.assertEqual(sorted(queue.keys()), [1, 3, 5])
        self.assertEqual(sorted(queue.values()), ["a", "c", "e"])
        self.assertEqual(queue.index("e"), 0)
        self.assertIsNone(queue.index("z"))
        self.assertEqual(queue.remove(queue.index("c")), (3, "c"))
        self.assertTrue(is_heap_ordered(queue))
        queue.clear()
        self.assertEqual(len(queue), 0)

    def test_min_overflow_keeps_largest(self):
        queue = MinPrioQueue()
        returned = [queue.push_overflow(p, str(p), 3) for p in [5, 1, 4, 2, 3]]
        self.assertEqual(returned, [None, None, None, (1, "1"), (2, "2")])
        self.assertEqual(queue.push_overflow(0, "0", 3), (0, "0"))
        self.assertEqual(sorted(queue.keys()), [3, 4, 5])

    def test_max_overflow_keeps_smallest(self):
        queue = MaxPrioQueue()
        self.assertIsNone(queue.push_overflow(5, "a", 2))
        self.assertIsNone(queue.push_overflow(1, "b", 2))
        self.assertEqual(queue.push_overflow(3, "c", 2), (5, "a"))
        self.assertEqual(queue.push_overflow(9, "d", 2), (9, "d"))
        self.assertEqual(sorted(queue.keys()), [1, 3])


class TestCapped(unittest.TestCase):
    def test_capped_heap_refuses_overflow(self):
        heap = CappedMinHeap(2, [3, 1])
        self.assertTrue(heap.is_full())
        self.assertEqual(heap.capacity(), 2)
        with self.assertRaises(HeapFullError):
            heap.insert(0)
        self.assertRaises(IndexError, heap.insert, 0)
        heap.extract_top()
        heap.insert(0)
        self.assertEqual(heap.peek(), 0)

    def test_data_exceeds_capacity(self):
        self.assertRaises(HeapFullError, CappedHeap, 1, [1, 2])

    def test_build_defaults_capacity_to_size(self):
        heap = CappedMaxHeap.build([1, 2, 3])
        self.assertEqual(heap.peek(), 3)
        self.assertTrue(heap.is_full())
        self.assertEqual(CappedMaxHeap.build([1], capacity=4).capacity(), 4)

    def test_capped_min_queue_top_k(self):
        queue = CappedMinPrioQueue(3)
        for i, p in enumerate([0.5, 0.1, 0.9, 0.7, 0.3, 0.8]):
            queue.push_overflow(p, i)
        self.assertEqual(len(queue), 3)
        self.assertEqual(queue.capacity(), 3)
        self.assertEqual(sorted(queue.keys()), [0.7, 0.8, 0.9])

    def test_capped_max_queue_bottom_k(self):
        queue = CappedMaxPrioQueue(2, [(4, "d")])
        for p in [7, 2, 6, 1]:
            queue.push_overflow(p, str(p))
        self.assertEqual(sorted(queue.values()), ["1", "2"])
        self.assertRaises(HeapFullError, queue.push, 0, "0")


if __name__ == "__main__":
    unittest.main()
