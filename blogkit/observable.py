"""A value holder that reports every assignment to an optional update callback."""

from __future__ import annotations

import operator
from typing import Any, Callable, Optional

UpdateProc = Callable[["Property", Any], None]


def _unwrap(value: Any) -> Any:
    return value.get() if isinstance(value, Property) else value


class Property:
    """Holds a value, forwards operations to it and notifies on assignment.

    Assignments through :meth:`set` and the in-place operators (``+=``,
    ``-=`` ...) call the update procedure, if one is set, with the property
    and the context given to :meth:`set_update_proc`. The plain binary
    operators return a new, unobserved property. Item assignment and
    attribute access go straight to the held value and are not reported.
    """

    __slots__ = ("_value", "_update")

    def __init__(self, value: Any = None) -> None:
        self._value = _unwrap(value)
        self._update: Optional[tuple[UpdateProc, Any]] = None

    def get(self) -> Any:
        """Return the held value."""
        return self._value

    def set(self, value: Any) -> "Property":
        """Replace the held value and report the update."""
        self._value = _unwrap(value)
        self._dispatch_update()
        return self

    def set_update_proc(self, proc: UpdateProc, ctx: Any = None) -> None:
        """Call ``proc(self, ctx)`` after each assignment from now on."""
        if not callable(proc):
            raise TypeError("update procedure must be callable")
        self._update = (proc, ctx)

    def clear_update_proc(self) -> None:
        """Stop reporting assignments."""
        self._update = None

    def _dispatch_update(self) -> None:
        if self._update is not None:
            proc, ctx = self._update
            proc(self, ctx)

    def _inplace(self, op: Callable[[Any, Any], Any], other: Any) -> "Property":
        self._value = op(self._value, _unwrap(other))
        self._dispatch_update()
        return self

    # comparisons

    def __eq__(self, other):
        return self._value == _unwrap(other)

    def __lt__(self, other):
        return self._value < _unwrap(other)

    def __le__(self, other):
        return self._value <= _unwrap(other)

    def __gt__(self, other):
        return self._value > _unwrap(other)

    def __ge__(self, other):
        return self._value >= _unwrap(other)

    __hash__ = None  # mutable holder

    # in-place operators: assign and report

    def __iadd__(self, other):
        return self._inplace(operator.iadd, other)

    def __isub__(self, other):
        return self._inplace(operator.isub, other)

    def __imul__(self, other):
        return self._inplace(operator.imul, other)

    def __itruediv__(self, other):
        return self._inplace(operator.itruediv, other)

    def __imod__(self, other):
        return self._inplace(operator.imod, other)

    def __iand__(self, other):
        return self._inplace(operator.iand, other)

    def __ior__(self, other):
        return self._inplace(operator.ior, other)

    def __ixor__(self, other):
        return self._inplace(operator.ixor, other)

    def __ilshift__(self, other):
        return self._inplace(operator.ilshift, other)

    def __irshift__(self, other):
        return self._inplace(operator.irshift, other)

    # binary operators: new property

    def __add__(self, other):
        return Property(self._value + _unwrap(other))

    def __radd__(self, other):
        return Property(_unwrap(other) + self._value)

    def __sub__(self, other):
        return Property(self._value - _unwrap(other))

    def __rsub__(self, other):
        return Property(_unwrap(other) - self._value)

    def __mul__(self, other):
        return Property(self._value * _unwrap(other))

    def __truediv__(self, other):
        return Property(self._value / _unwrap(other))

    def __mod__(self, other):
        return Property(self._value % _unwrap(other))

    def __and__(self, other):
        return Property(self._value & _unwrap(other))

    def __or__(self, other):
        return Property(self._value | _unwrap(other))

    def __xor__(self, other):
        return Property(self._value ^ _unwrap(other))

    def __lshift__(self, other):
        return Property(self._value << _unwrap(other))

    def __rshift__(self, other):
        return Property(self._value >> _unwrap(other))

    # unary operators

    def __neg__(self):
        return Property(-self._value)

    def __pos__(self):
        return Property(+self._value)

    def __invert__(self):
        return Property(~self._value)

    # forwarding to the held value

    def __getitem__(self, key):
        return self._value[key]

    def __setitem__(self, key, value):
        self._value[key] = value

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._value, name)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Property({self._value!r})"