import pytest

from blogkit.memory_pool import Chunk, MemoryPool


def test_fresh_pool_has_no_blocks():
    pool = MemoryPool(16, 4)
    assert pool.allocated_blocks() == 0
    assert pool.chunk_capacity() == 0
    assert pool.empty()


def test_reserve_blocks_grows_capacity():
    pool = MemoryPool(16, 4)
    pool.reserve_blocks(2)
    assert pool.allocated_blocks() == 2
    assert pool.chunk_capacity() == 2 * pool.chunks_per_block
    assert pool.empty()


def test_reserve_blocks_never_shrinks():
    pool = MemoryPool(16, 4)
    pool.reserve_blocks(3)
    pool.reserve_blocks(1)
    assert pool.allocated_blocks() == 3


def test_block_size_is_chunk_size_times_chunks():
    pool = MemoryPool(10, 10)
    assert pool.block_size() == pool.chunk_size * pool.chunks_per_block


def test_malloc_fills_block_then_grows():
    pool = MemoryPool(16, 4)
    chunks = [pool.malloc() for _ in range(4)]
    assert pool.allocated_blocks() == 1
    assert pool.full()
    chunks.append(pool.malloc())
    assert pool.allocated_blocks() == 2
    assert pool.allocated_chunks() == 5
    assert not pool.full()


def test_reserved_chunks_used_before_growing():
    pool = MemoryPool(16, 3)
    pool.reserve_blocks(2)
    for _ in range(6):
        pool.malloc()
    assert pool.allocated_blocks() == 2
    assert pool.full()


def test_chunks_are_distinct_and_sized():
    pool = MemoryPool(24, 5)
    chunks = [pool.malloc() for _ in range(12)]
    assert len({id(c) for c in chunks}) == 12
    assert all(len(c.storage) == 24 for c in chunks)
    assert all(isinstance(c, Chunk) and c.in_use for c in chunks)


def test_free_is_lifo():
    pool = MemoryPool(16, 4)
    first, second = pool.malloc(), pool.malloc()
    pool.free(first)
    pool.free(second)
    assert pool.malloc() is second
    assert pool.malloc() is first


def test_free_everything_makes_pool_empty():
    pool = MemoryPool(10, 10)
    chunks = [pool.malloc() for _ in range(30)]
    for chunk in reversed(chunks):
        pool.free(chunk)
    assert pool.empty()
    assert pool.allocated_blocks() == 3
    again = [pool.malloc() for _ in range(30)]
    assert pool.allocated_blocks() == 3
    assert {id(c) for c in again} == {id(c) for c in chunks}


def test_double_free_raises():
    pool = MemoryPool(16, 4)
    chunk = pool.malloc()
    pool.free(chunk)
    with pytest.raises(ValueError):
        pool.free(chunk)


def test_foreign_chunk_raises():
    pool_a, pool_b = MemoryPool(16, 4), MemoryPool(16, 4)
    chunk = pool_a.malloc()
    with pytest.raises(ValueError):
        pool_b.free(chunk)


def test_invalid_parameters():
    with pytest.raises(ValueError):
        MemoryPool(1, 4)
    with pytest.raises(ValueError):
        MemoryPool(16, 0)


def test_str_describes_pool():
    pool = MemoryPool(10, 10)
    pool.reserve_blocks(1)
    assert str(pool) == (
        "CS: 10, BS: 100, CPB: 10, chunks: 0, blocks: 1, "
        "chunk capacity: 10, full: no"
    )
    for _ in range(10):
        pool.malloc()
    assert str(pool).endswith("full: yes")