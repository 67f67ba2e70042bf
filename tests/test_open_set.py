import random
import unittest
from collections import namedtuple

from eightpuzzle.search.open_set import DaryHeap, EmptyQueueError

Item = namedtuple("Item", ["f", "tag"])


class DaryHeapTestCase(unittest.TestCase):
    def test_pops_are_non_decreasing_for_random_pushes(self):
        rng = random.Random(1234)
        for arity in (2, 3, 4, 8):
            heap = DaryHeap(arity=arity, capacity=4)
            values = [rng.randint(0, 50) for _ in range(500)]
            for i, v in enumerate(values):
                heap.push(Item(v, i))
            popped = [heap.pop_min().f for _ in range(len(values))]
            self.assertEqual(sorted(values), popped, f"arity={arity}")
            self.assertEqual(0, len(heap))

    def test_interleaved_push_pop_tracks_minimum(self):
        rng = random.Random(99)
        heap = DaryHeap(arity=4, capacity=2)
        live = []
        last = None
        for step in range(3000):
            if live and rng.random() < 0.45:
                got = heap.pop_min().f
                self.assertEqual(min(live), got)
                live.remove(got)
            else:
                v = rng.randint(0, 1000)
                heap.push(Item(v, step))
                live.append(v)
            self.assertEqual(len(live), len(heap))
            if live:
                self.assertEqual(min(live), heap.peek().f)
        # drain: monotone
        while heap:
            cur = heap.pop_min().f
            if last is not None:
                self.assertGreaterEqual(cur, last)
            last = cur

    def test_capacity_doubles_when_full(self):
        heap = DaryHeap(capacity=2)
        self.assertEqual(2, heap.capacity)
        for i in range(5):
            heap.push(Item(i, i))
        self.assertEqual(8, heap.capacity)
        self.assertEqual(5, len(heap))

    def test_empty_heap_signals(self):
        heap = DaryHeap()
        self.assertFalse(heap)
        with self.assertRaises(EmptyQueueError):
            heap.pop_min()
        with self.assertRaises(IndexError):
            heap.peek()
        heap.push(Item(3, "x"))
        self.assertEqual("x", heap.pop_min().tag)
        with self.assertRaises(EmptyQueueError):
            heap.pop_min()

    def test_custom_key_and_arity_check(self):
        heap = DaryHeap(arity=3, key=lambda x: -x)
        for v in (5, 1, 9, 3):
            heap.push(v)
        self.assertEqual([9, 5, 3, 1], [heap.pop_min() for _ in range(4)])
        with self.assertRaises(ValueError):
            DaryHeap(arity=1)


if __name__ == "__main__":
    unittest.main()
