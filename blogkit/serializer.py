"""A small binary serializer with per-kind pluggable pack/unpack transforms.

Values are packed as ``(kind, value)`` pairs. A *kind* is any hashable key.
Kinds that are single :mod:`struct` format characters (``"B"``, ``"H"``,
``"I"``, ``"Q"``, ``"i"``, ``"c"``, ``"d"`` ...) have a built-in fixed-width
little-endian encoding. Any kind, scalar or not, may be given custom
transforms that override or supply its encoding.
"""

from __future__ import annotations

import struct
from collections.abc import Callable, Hashable
from typing import Any

INT8 = "b"
UINT8 = "B"
INT16 = "h"
UINT16 = "H"
INT32 = "i"
UINT32 = "I"
INT64 = "q"
UINT64 = "Q"
FLOAT = "f"
DOUBLE = "d"
CHAR = "c"
BOOL = "?"

SCALAR_KINDS = frozenset(
    (INT8, UINT8, INT16, UINT16, INT32, UINT32, INT64, UINT64, FLOAT, DOUBLE, CHAR, BOOL)
)

PackTransform = Callable[["Serializer", Any, bytearray], None]
UnpackTransform = Callable[["Serializer", "ByteReader"], Any]
PackSizeProc = Callable[["Serializer", Any], int]


def _scalar_format(kind: Hashable) -> str:
    if isinstance(kind, str) and kind in SCALAR_KINDS:
        return "<" + kind
    raise TypeError(f"no built-in encoding for kind {kind!r}")


class ByteReader:
    """A forward-only cursor over a bytes-like buffer."""

    def __init__(self, data) -> None:
        self._data = bytes(memoryview(data))
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    def read(self, count: int) -> bytes:
        """Return the next ``count`` bytes and advance past them."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count > self.remaining():
            raise ValueError(
                f"cannot read {count} bytes, only {self.remaining()} left"
            )
        start = self._position
        self._position += count
        return self._data[start:self._position]

    def remaining(self) -> int:
        """Return how many bytes are left to read."""
        return len(self._data) - self._position


class Serializer:
    """Packs typed values into bytes and back, using registered transforms."""

    def __init__(self) -> None:
        self._pack_transforms: dict[Hashable, PackTransform] = {}
        self._unpack_transforms: dict[Hashable, UnpackTransform] = {}
        self._pack_size_procs: dict[Hashable, PackSizeProc] = {}

    @staticmethod
    def _register(table: dict, kind: Hashable, proc: Callable) -> bool:
        inserted = kind not in table
        table[kind] = proc
        return inserted

    @staticmethod
    def _unregister(table: dict, kind: Hashable) -> bool:
        return table.pop(kind, None) is not None

    def add_pack_transform(self, kind: Hashable, proc: PackTransform) -> bool:
        """Set how ``kind`` is packed; return True if it was not set before."""
        return self._register(self._pack_transforms, kind, proc)

    def remove_pack_transform(self, kind: Hashable) -> bool:
        """Drop the pack transform of ``kind``; return True if one was removed."""
        return self._unregister(self._pack_transforms, kind)

    def add_unpack_transform(self, kind: Hashable, proc: UnpackTransform) -> bool:
        """Set how ``kind`` is unpacked; return True if it was not set before."""
        return self._register(self._unpack_transforms, kind, proc)

    def remove_unpack_transform(self, kind: Hashable) -> bool:
        """Drop the unpack transform of ``kind``; return True if one was removed."""
        return self._unregister(self._unpack_transforms, kind)

    def add_pack_size_proc(self, kind: Hashable, proc: PackSizeProc) -> bool:
        """Set how the packed size of ``kind`` is computed."""
        return self._register(self._pack_size_procs, kind, proc)

    def remove_pack_size_proc(self, kind: Hashable) -> bool:
        """Drop the size procedure of ``kind``; return True if one was removed."""
        return self._unregister(self._pack_size_procs, kind)

    def pack_bytes(self, out: bytearray, data) -> None:
        """Append raw bytes to ``out``."""
        out += bytes(memoryview(data))

    def pack_value(self, out: bytearray, kind: Hashable, value) -> None:
        """Append the built-in fixed-width encoding of a scalar ``value``."""
        fmt = _scalar_format(kind)
        try:
            out += struct.pack(fmt, value)
        except struct.error as error:
            raise ValueError(f"cannot pack {value!r} as kind {kind!r}: {error}") from error

    def pack_type(self, out: bytearray, kind: Hashable, value) -> None:
        """Append ``value`` using the transform of ``kind`` or its built-in encoding."""
        transform = self._pack_transforms.get(kind)
        if transform is not None:
            transform(self, value, out)
        else:
            self.pack_value(out, kind, value)

    def pack_size(self, kind: Hashable, value) -> int:
        """Return how many bytes ``value`` of ``kind`` packs into."""
        size_proc = self._pack_size_procs.get(kind)
        if size_proc is not None:
            return size_proc(self, value)
        if kind in self._pack_transforms:
            scratch = bytearray()
            self.pack_type(scratch, kind, value)
            return len(scratch)
        return struct.calcsize(_scalar_format(kind))

    def pack(self, *args) -> bytes:
        """Pack ``(kind, value)`` pairs, in order, into one buffer."""
        items = []
        for item in args:
            if not isinstance(item, tuple) or len(item) != 2:
                raise TypeError(f"expected a (kind, value) pair, got {item!r}")
            items.append(item)

        expected = sum(self.pack_size(kind, value) for kind, value in items)
        out = bytearray()
        for kind, value in items:
            self.pack_type(out, kind, value)
        if len(out) != expected:
            raise ValueError(
                f"packed {len(out)} bytes but size procedures predicted {expected}"
            )
        return bytes(out)

    def unpack_bytes(self, reader: ByteReader, count: int) -> bytes:
        """Read ``count`` raw bytes."""
        return reader.read(count)

    def unpack_value(self, reader: ByteReader, kind: Hashable):
        """Read a scalar of ``kind`` in its built-in encoding."""
        fmt = _scalar_format(kind)
        (value,) = struct.unpack(fmt, reader.read(struct.calcsize(fmt)))
        return value

    def unpack_type(self, reader: ByteReader, kind: Hashable):
        """Read a value of ``kind`` using its transform or built-in encoding."""
        transform = self._unpack_transforms.get(kind)
        if transform is not None:
            return transform(self, reader)
        return self.unpack_value(reader, kind)

    def unpack(self, data, *args) -> tuple:
        """Read one value of each given kind, in order, from ``data``."""
        reader = data if isinstance(data, ByteReader) else ByteReader(data)
        return tuple(self.unpack_type(reader, kind) for kind in args)