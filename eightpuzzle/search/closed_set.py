from __future__ import annotations
import logging
import math

import numpy as np

logger = logging.getLogger(__name__)


def is_prime(n: int) -> bool:
    if n <= 1:
        return False
    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            return False
    return True

def next_prime(n: int) -> int:
    """Smallest prime >= n."""
    i = max(n, 2)
    while not is_prime(i):
        i += 1
    return i


class FingerprintSet:
    """
    Open-addressing hash set of non-negative integer fingerprints.

    - capacity is always prime; slot index is `key % capacity`
    - linear probing: probe(h, i) = (h + i) % capacity
    - each slot is tagged empty/occupied in a separate array, so every
      key value (0 included) is storable
    - grows to next_prime(2 * capacity) before an insert would push the
      load factor past `max_load`
    """

    def __init__(self, capacity: int = 1000, max_load: float = 0.7):
        if not 0.0 < max_load < 1.0:
            raise ValueError(f"max_load must be in (0, 1), got {max_load}")
        self.max_load = max_load
        self._size = 0
        self._alloc(next_prime(capacity))

    def _alloc(self, capacity: int) -> None:
        self._capacity = capacity
        self._keys = np.zeros(capacity, dtype=np.int64)
        self._used = np.zeros(capacity, dtype=bool)

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._size / self._capacity

    def _probe(self, key: int) -> int:
        """Index of `key`'s slot, or of the first empty slot on its probe path."""
        cap = self._capacity
        keys, used = self._keys, self._used
        p = key % cap
        while used[p] and keys[p] != key:
            p += 1
            if p == cap:
                p = 0
        return p

    def __contains__(self, key: int) -> bool:
        if key < 0:
            return False
        p = self._probe(key)
        return bool(self._used[p])

    def add(self, key: int) -> bool:
        """Insert `key`. Returns False if it was already present."""
        if key < 0:
            raise ValueError(f"fingerprints must be non-negative, got {key}")
        p = self._probe(key)
        if self._used[p]:
            return False
        if (self._size + 1) / self._capacity > self.max_load:
            self.rehash()
            p = self._probe(key)
        self._keys[p] = key
        self._used[p] = True
        self._size += 1
        return True

    def rehash(self) -> None:
        old_keys = self._keys[self._used]
        old_capacity = self._capacity
        self._alloc(next_prime(old_capacity * 2))
        for key in old_keys.tolist():
            p = self._probe(key)
            self._keys[p] = key
            self._used[p] = True
        logger.debug("closed set rehash: capacity %d -> %d (%d keys)",
                     old_capacity, self._capacity, self._size)
