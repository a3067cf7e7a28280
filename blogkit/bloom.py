"""A Bloom filter built on the multi-hash generator."""

from __future__ import annotations

from .hashing import hash_n


class BloomFilter:
    """Probabilistic set membership: no false negatives, some false positives."""

    def __init__(self, size: int, hash_count: int = 3) -> None:
        if size <= 0:
            raise ValueError("Size must be greater than zero!")
        if hash_count <= 0:
            raise ValueError("Hash count must be greater than zero!")
        self._bits = bytearray(size)
        self._hash_count = hash_count

    @property
    def size(self) -> int:
        return len(self._bits)

    @property
    def hash_count(self) -> int:
        return self._hash_count

    def _positions(self, key):
        return (h % len(self._bits) for h in hash_n(key, self._hash_count))

    def add(self, key) -> None:
        """Record ``key`` in the filter."""
        for position in self._positions(key):
            self._bits[position] = 1

    def contains(self, key) -> bool:
        """Return False if ``key`` was certainly never added."""
        return all(self._bits[position] for position in self._positions(key))

    def __contains__(self, key) -> bool:
        return self.contains(key)