from __future__ import annotations
from operator import attrgetter
from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class EmptyQueueError(IndexError):
    """Raised by pop_min()/peek() on an empty heap."""


class DaryHeap(Generic[T]):
    """
    Array-backed d-ary min-heap ordered by `key(item)` (default: `item.f`).

    Children of slot i live at d*i+1 .. d*i+d, parent of i at (i-1)//d.
    The backing list is preallocated and doubled when full; `len(heap)`
    is the number of live entries. There is no decrease-key: the same
    state may be pushed several times and the caller skips stale copies.
    """

    def __init__(self, arity: int = 4, capacity: int = 1024,
                 key: Callable[[T], Any] = attrgetter("f")):
        if arity < 2:
            raise ValueError(f"arity must be >= 2, got {arity}")
        self.arity = arity
        self.key = key
        self._heap: List[Optional[T]] = [None] * max(1, capacity)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    @property
    def capacity(self) -> int:
        return len(self._heap)

    def _ensure_capacity(self) -> None:
        if self._size >= len(self._heap):
            self._heap.extend([None] * len(self._heap))

    def push(self, item: T) -> None:
        self._ensure_capacity()
        heap, key, d = self._heap, self.key, self.arity
        pos = self._size
        self._size += 1
        k = key(item)
        # sift up: move parents down until one is not larger
        while pos > 0:
            parent = (pos - 1) // d
            p = heap[parent]
            if key(p) <= k:
                break
            heap[pos] = p
            pos = parent
        heap[pos] = item

    def peek(self) -> T:
        if self._size == 0:
            raise EmptyQueueError("peek on an empty heap")
        return self._heap[0]

    def pop_min(self) -> T:
        if self._size == 0:
            raise EmptyQueueError("pop_min on an empty heap")
        heap, key, d = self._heap, self.key, self.arity
        top = heap[0]
        self._size -= 1
        n = self._size
        last = heap[n]
        heap[n] = None
        if n == 0:
            heap[0] = None
            return top

        # sift the former last element down from the root
        k = key(last)
        pos = 0
        while True:
            first = d * pos + 1
            if first >= n:
                break
            child = first
            child_key = key(heap[first])
            for c in range(first + 1, min(first + d, n)):
                ck = key(heap[c])
                if ck < child_key:
                    child, child_key = c, ck
            if child_key >= k:
                break
            heap[pos] = heap[child]
            pos = child
        heap[pos] = last
        return top
