"""Small, self-contained building blocks: encoding, hashing, filters, pools, queues and more."""

__version__ = "0.1.0"

__all__ = [
    "base64",
    "bloom",
    "decorators",
    "hashing",
    "interview",
    "istring",
    "memory_pool",
    "observable",
    "queues",
    "serializer",
    "sync",
]