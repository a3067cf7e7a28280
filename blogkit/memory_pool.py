"""A fixed-size chunk allocator that grows a block of chunks at a time."""

from __future__ import annotations

import itertools
import logging
import struct
from typing import Optional

_log = logging.getLogger(__name__)

POINTER_SIZE = struct.calcsize("P")


class Chunk:
    """One fixed-size piece of storage handed out by a :class:`MemoryPool`."""

    __slots__ = ("storage", "seq", "_next", "_pool", "_in_use")

    def __init__(
        self,
        pool: "MemoryPool",
        size: int,
        seq: int,
        next_chunk: Optional["Chunk"] = None,
    ) -> None:
        self.storage = bytearray(size)
        self.seq = seq
        self._next = next_chunk
        self._pool = pool
        self._in_use = False

    @property
    def in_use(self) -> bool:
        return self._in_use

    def __repr__(self) -> str:
        state = "in use" if self._in_use else "free"
        return f"Chunk(#{self.seq:02d}, {len(self.storage)} bytes, {state})"


class MemoryPool:
    """Hands out equally sized chunks, reusing freed ones before growing."""

    def __init__(self, chunk_size: int, chunks_per_block: int = 32) -> None:
        if chunk_size < POINTER_SIZE:
            raise ValueError(f"Chunk size must be at least {POINTER_SIZE} bytes!")
        if chunks_per_block <= 0:
            raise ValueError("Chunks per block must be greater than zero!")
        self._chunk_size = chunk_size
        self._chunks_per_block = chunks_per_block
        self._chunks = 0
        self._next_chunk: Optional[Chunk] = None
        self._blocks: list[list[Chunk]] = []
        self._seq = itertools.count(1)

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def chunks_per_block(self) -> int:
        return self._chunks_per_block

    def malloc(self) -> Chunk:
        """Return a free chunk, allocating a new block when none is left."""
        if self._next_chunk is None:
            self._next_chunk = self._allocate_block(None)
        chunk = self._next_chunk
        self._next_chunk = chunk._next
        chunk._next = None
        chunk._in_use = True
        self._chunks += 1
        _log.debug("malloc chunk #%02d %r", chunk.seq, chunk)
        return chunk

    def free(self, chunk: Chunk) -> None:
        """Return ``chunk`` to the pool; it is the next one handed out."""
        if not isinstance(chunk, Chunk) or chunk._pool is not self:
            raise ValueError("Chunk does not belong to this pool!")
        if not chunk._in_use:
            raise ValueError("Chunk is already free!")
        chunk._in_use = False
        chunk._next = self._next_chunk
        self._next_chunk = chunk
        self._chunks -= 1
        _log.debug("free   chunk #%02d %r", chunk.seq, chunk)

    def reserve_blocks(self, blocks: int) -> None:
        """Grow the pool until it holds at least ``blocks`` blocks."""
        while blocks > len(self._blocks):
            self._next_chunk = self._allocate_block(self._next_chunk)

    def empty(self) -> bool:
        """True when no chunk is handed out."""
        return not self.allocated_chunks()

    def full(self) -> bool:
        """True when every chunk of every block is handed out."""
        return self.allocated_chunks() == self.chunk_capacity()

    def allocated_chunks(self) -> int:
        return self._chunks

    def allocated_blocks(self) -> int:
        return len(self._blocks)

    def block_size(self) -> int:
        return self._chunk_size * self._chunks_per_block

    def chunk_capacity(self) -> int:
        return len(self._blocks) * self._chunks_per_block

    def _allocate_block(self, tail: Optional[Chunk]) -> Chunk:
        block = [
            Chunk(self, self._chunk_size, next(self._seq))
            for _ in range(self._chunks_per_block)
        ]
        for chunk, following in zip(block, [*block[1:], tail]):
            chunk._next = following
            _log.debug("create chunk #%02d -> %r", chunk.seq, following)
        self._blocks.append(block)
        return block[0]

    def __str__(self) -> str:
        return (
            f"CS: {self.chunk_size}, BS: {self.block_size()}, "
            f"CPB: {self.chunks_per_block}, chunks: {self.allocated_chunks()}, "
            f"blocks: {self.allocated_blocks()}, "
            f"chunk capacity: {self.chunk_capacity()}, "
            f"full: {'yes' if self.full() else 'no'}"
        )