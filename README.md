# blogkit

blogkit is a set of small, self-contained building blocks written in plain
Python. It has no runtime dependencies.

## What is inside

| Module                 | What it gives you                                                                   |
|------------------------|-------------------------------------------------------------------------------------|
| `blogkit.base64`       | `encode(data)` and `decode(text)` for standard base64 with `=` padding, and `main` |
| `blogkit.hashing`      | `stable_hash`, `pair_hash`, `hash_n` and the `MersenneTwister64` generator          |
| `blogkit.bloom`        | `BloomFilter`, a probabilistic set membership test                                  |
| `blogkit.istring`      | `IString`, a `str` that compares and hashes without regard to case, and `compare_ignore_case` |
| `blogkit.serializer`   | `Serializer` and `ByteReader`, a binary packer with pluggable per-kind transforms   |
| `blogkit.memory_pool`  | `MemoryPool` and `Chunk`, a fixed-size chunk allocator organised in blocks          |
| `blogkit.sync`         | `Spinlock`, `ManualEvent`, `AutoEvent` and `Semaphore`                              |
| `blogkit.queues`       | `UnboundedQueue`, `BoundedQueue`, `ThreadPool` and the `QueueClosed` error          |
| `blogkit.decorators`   | document and socket decorators, an `Adapter`, and `debug_decorator`                 |
| `blogkit.interview`    | `TwoStackQueue`, `Range`, `find_range`, `run_offsets`, `invert_pairs`, `numbers_without_adjacent_ones` |
| `blogkit.observable`   | `Property`, a value wrapper that reports assignments to a callback                  |

## Examples

### Base64

```python
from blogkit.base64 import encode, decode

text = encode(b"Man")        # "TWFu"
assert decode(text) == b"Man"
```

`decode` raises `ValueError` on input whose length is not a multiple of four,
on a character outside the base64 alphabet, and on misplaced padding.

### Several hashes from one key

```python
from blogkit.hashing import hash_n, stable_hash

first, second, third = hash_n("Hash from this string is...", 3)
assert stable_hash(42) == 42
```

`stable_hash` gives the same value in every process: integers hash to
themselves modulo 2**64, strings and bytes use FNV-1a. `hash_n` draws its
hashes from a 64-bit Mersenne Twister seeded with that hash, so the same key
always yields the same sequence. A count of zero or less raises `ValueError`.

### Bloom filter

```python
from blogkit.bloom import BloomFilter

bloom = BloomFilter(128, 3)
for word in ("Martin", "Blog"):
    bloom.add(word)

assert "Martin" in bloom
assert bloom.contains("Blog")
```

A filter never gives a false negative; it may give a false positive.

### Case-insensitive strings

```python
from blogkit.istring import IString, compare_ignore_case

assert IString("aaa") == IString("AAA")
assert IString("aaa") == "AAA"
assert IString("aaa").compare("bbb") == -1
assert compare_ignore_case("bbb", "AAA") == 1
```

### Binary serializer

Values are packed as `(kind, value)` pairs. Single `struct` format characters
(`"B"`, `"H"`, `"I"`, `"Q"`, `"i"`, `"c"`, `"d"` and so on) have a built-in
little-endian encoding; any kind can be given its own pack, unpack and size
procedures.

```python
from blogkit.serializer import Serializer

s = Serializer()
data = s.pack(("B", 0x12), ("H", 0x1234))
assert data == b"\x12\x34\x12"
assert s.unpack(data, "B", "H") == (0x12, 0x1234)

def pack_text(ser, value, out):
    raw = value.encode("utf-8")
    ser.pack_type(out, "H", len(raw))
    ser.pack_bytes(out, raw)

def unpack_text(ser, reader):
    length = ser.unpack_type(reader, "H")
    return ser.unpack_bytes(reader, length).decode("utf-8")

s.add_pack_transform("text", pack_text)
s.add_unpack_transform("text", unpack_text)
assert s.unpack(s.pack(("text", "hello")), "text") == ("hello",)
```

### Memory pool

```python
from blogkit.memory_pool import MemoryPool

pool = MemoryPool(16, 10)
pool.reserve_blocks(1)
chunk = pool.malloc()
pool.free(chunk)
print(pool)
```

A chunk freed back to the pool is the next one handed out. Freeing a chunk
twice, or a chunk from another pool, raises `ValueError`.

### Synchronisation primitives

```python
from blogkit.sync import AutoEvent, Semaphore

event = AutoEvent(True)
assert event.wait(timeout=0) is True    # consumes the signal
assert event.wait(timeout=0) is False

sem = Semaphore(2)
sem.post(2)
```

`wait` on each event and on `Semaphore` takes an optional timeout and returns
`False` if it runs out.

### Queues and thread pools

```python
from blogkit.queues import BoundedQueue, ThreadPool

with ThreadPool(4) as pool:
    pool.do_work(lambda: print("working"))
```

A `BoundedQueue` blocks producers while it is full. Calling `done()` wakes
every waiter on either queue type; from then on `pop` (and, on a bounded
queue, `push`) raises `QueueClosed`. `ThreadPool.shutdown()`, also run on
leaving the `with` block, lets queued work finish before the workers stop.

### Decorators

```python
import sys
from blogkit.decorators import CompressedDocument, EncryptedDocument, PdfDocument

CompressedDocument(EncryptedDocument(PdfDocument(), "RSA"), "TGS").save(sys.stdout)
```

### Observable properties

```python
from blogkit.observable import Property

seen = []
value = Property(1)
value.set_update_proc(lambda prop, ctx: seen.append(prop.get()), None)
value += 2
assert seen == [3]
```

Only `set` and the in-place operators report; plain binary operators return
a new, unobserved `Property`.

## Command line

```
blogkit-base64
```

encodes a sample passage, checks the result against a known reference,
decodes it again and checks that the round trip gives back the original. It
exits with status 1 if either check fails.

## What it does not do

`TcpSocket` and `UdpSocket` in `blogkit.decorators` open no connections: they,
and the socket decorators wrapped around them, only write a line describing
the traffic. The serializer produces and reads bytes but comes with no
network transport, client or server.

## Requirements

Python 3.10 or newer. The tests use pytest (`pip install blogkit[test]`).