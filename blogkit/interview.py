"""Small interview puzzles: a two-stack queue, bit patterns, runs, ranges, inversion."""

from __future__ import annotations

import bisect
import itertools
from dataclasses import dataclass
from typing import Any, Hashable, Iterable


class TwoStackQueue:
    """A FIFO queue built from two LIFO stacks."""

    def __init__(self) -> None:
        self._push: list[Any] = []
        self._pop: list[Any] = []

    @staticmethod
    def _spill(source: list, target: list) -> None:
        while source:
            target.append(source.pop())

    def push(self, item: Any) -> None:
        self._spill(self._pop, self._push)
        self._push.append(item)

    def pop(self) -> Any:
        """Remove and return the oldest item; raise IndexError when empty."""
        self._spill(self._push, self._pop)
        if not self._pop:
            raise IndexError("pop from an empty queue")
        return self._pop.pop()

    def empty(self) -> bool:
        return not self._push and not self._pop

    def __len__(self) -> int:
        return len(self._push) + len(self._pop)


@dataclass(frozen=True)
class Range:
    """The half-open interval [lo, hi); ranges order by their lower bound."""

    lo: int
    hi: int

    def contains(self, point: int) -> bool:
        return self.lo <= point < self.hi

    def __lt__(self, other: "Range") -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return self.lo < other.lo

    def __str__(self) -> str:
        return f"LO: {self.lo}, HI: {self.hi}"


def numbers_without_adjacent_ones(bits: int = 8) -> list[int]:
    """Return the numbers below 2**bits - 1 with no two adjacent set bits."""
    if bits < 1:
        raise ValueError("bits must be at least 1")
    return [n for n in range((1 << bits) - 1) if not n & (n >> 1)]


def run_offsets(text: str) -> list[int]:
    """Return the start offsets of every run of two or more equal characters."""
    offsets = []
    position = 0
    for _, group in itertools.groupby(text):
        length = sum(1 for _ in group)
        if length > 1:
            offsets.append(position)
        position += length
    return offsets


def find_range(ranges: Iterable[Range], point: int) -> Range:
    """Return the range holding ``point``; raise ValueError if none does."""
    ordered = sorted(ranges)
    index = bisect.bisect_right(ordered, point, key=lambda r: r.lo) - 1
    if index >= 0 and ordered[index].contains(point):
        return ordered[index]
    for candidate in ordered[max(index, 0):]:
        if candidate.lo > point:
            break
        if candidate.contains(point):
            return candidate
    raise ValueError(f"{point} falls in no range")


def invert_pairs(pairs: Iterable[tuple[Hashable, Hashable]]) -> list[tuple[Any, Any]]:
    """Swap keys and values of a multimap, returning pairs sorted by new key.

    Equal keys keep the order in which they appear in the key-sorted source.
    """
    source = sorted(pairs, key=lambda pair: pair[0])
    return sorted(((value, key) for key, value in source), key=lambda pair: pair[0])