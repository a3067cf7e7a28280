"""Deterministic hashing and multi-hash generation from a seeded Mersenne Twister."""

from __future__ import annotations

import struct

_MASK64 = (1 << 64) - 1

_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3


class MersenneTwister64:
    """The 64-bit Mersenne Twister (mt19937_64) pseudo-random generator."""

    _N = 312
    _M = 156
    _MATRIX_A = 0xB5026F5AA96619E9
    _UPPER = _MASK64 & ~((1 << 31) - 1)
    _LOWER = (1 << 31) - 1

    def __init__(self, seed: int = 5489) -> None:
        state = [seed & _MASK64]
        for i in range(1, self._N):
            previous = state[-1]
            state.append((6364136223846793005 * (previous ^ (previous >> 62)) + i) & _MASK64)
        self._state = state
        self._index = self._N

    def _twist(self) -> None:
        state, n, m = self._state, self._N, self._M
        for i in range(n):
            x = (state[i] & self._UPPER) | (state[(i + 1) % n] & self._LOWER)
            shifted = x >> 1
            if x & 1:
                shifted ^= self._MATRIX_A
            state[i] = state[(i + m) % n] ^ shifted
        self._index = 0

    def __call__(self) -> int:
        """Return the next 64-bit output."""
        if self._index >= self._N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= (y >> 29) & 0x5555555555555555
        y ^= (y << 17) & 0x71D67FFFEDA60000
        y ^= (y << 37) & 0xFFF7EEE000000000
        y ^= y >> 43
        return y & _MASK64

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self()


def _fnv1a(data: bytes) -> int:
    value = _FNV_OFFSET
    for byte in data:
        value = ((value ^ byte) * _FNV_PRIME) & _MASK64
    return value


def stable_hash(key) -> int:
    """Return a 64-bit hash of ``key`` that is the same in every process.

    Integers hash to themselves (modulo 2**64); strings and bytes use FNV-1a;
    floats hash their IEEE-754 bytes, with both zeros hashing to 0.
    """
    if isinstance(key, int):
        return int(key) & _MASK64
    if isinstance(key, float):
        return 0 if key == 0.0 else _fnv1a(struct.pack("<d", key))
    if isinstance(key, str):
        return _fnv1a(key.encode("utf-8"))
    if isinstance(key, (bytes, bytearray, memoryview)):
        return _fnv1a(bytes(key))
    raise TypeError(f"unhashable key type: {type(key).__name__}")


def pair_hash(first, second) -> int:
    """Combine the hashes of two keys; the order of the keys matters."""
    return (stable_hash(first) ^ (stable_hash(second) << 1)) & _MASK64


def hash_n(key, count: int) -> list[int]:
    """Return ``count`` 64-bit hashes of ``key`` drawn from a generator seeded by it."""
    if count <= 0:
        raise ValueError("Hash count must be greater than zero!")
    generator = MersenneTwister64(stable_hash(key))
    return [generator() for _ in range(count)]