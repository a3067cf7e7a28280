"""A string type whose comparisons ignore letter case."""

from __future__ import annotations


def _upper_char(char: str) -> str:
    upper = char.upper()
    return upper if len(upper) == 1 else char


def _fold(text: str) -> str:
    return "".join(_upper_char(char) for char in text)


def compare_ignore_case(left: str, right: str) -> int:
    """Three-way compare two strings character by character, ignoring case."""
    a, b = _fold(left), _fold(right)
    return (a > b) - (a < b)


class IString(str):
    """A str that compares and hashes case-insensitively."""

    __slots__ = ()

    def compare(self, other: str) -> int:
        """Return -1, 0 or 1 as this string sorts before, with or after ``other``."""
        return compare_ignore_case(self, other)

    def __eq__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return compare_ignore_case(self, other) == 0

    def __ne__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return compare_ignore_case(self, other) != 0

    def __lt__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return compare_ignore_case(self, other) < 0

    def __le__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return compare_ignore_case(self, other) <= 0

    def __gt__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return compare_ignore_case(self, other) > 0

    def __ge__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return compare_ignore_case(self, other) >= 0

    def __hash__(self):
        return hash(_fold(self))

    def __repr__(self) -> str:
        return f"IString({str.__repr__(self)})"