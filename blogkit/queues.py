"""Blocking queues and a simple thread pool built on them."""

from __future__ import annotations

import collections
import logging
import os
import threading
from typing import Any, Callable, Optional

_log = logging.getLogger(__name__)


class QueueClosed(Exception):
    """Raised by a queue operation after the queue was marked done."""


class UnboundedQueue:
    """A FIFO queue whose pop blocks until an item arrives or it is done."""

    def __init__(self) -> None:
        self._items: collections.deque = collections.deque()
        self._cv = threading.Condition()
        self._done = False

    def push(self, item: Any) -> None:
        with self._cv:
            self._items.append(item)
            self._cv.notify()

    def pop(self) -> Any:
        """Return the oldest item; raise QueueClosed once the queue is done."""
        with self._cv:
            self._cv.wait_for(lambda: self._items or self._done)
            if self._done:
                raise QueueClosed("queue is done")
            return self._items.popleft()

    def __len__(self) -> int:
        with self._cv:
            return len(self._items)

    def empty(self) -> bool:
        with self._cv:
            return not self._items

    def done(self) -> None:
        """Wake every waiter; further pops raise QueueClosed."""
        with self._cv:
            self._done = True
            self._cv.notify_all()


class BoundedQueue:
    """A FIFO queue holding at most ``max_size`` items; push blocks when full."""

    def __init__(self, max_size: int) -> None:
        if max_size <= 0:
            raise ValueError("bad queue max-size! must be non-zero!")
        self._max_size = max_size
        self._items: collections.deque = collections.deque()
        self._lock = threading.Lock()
        self._can_push = threading.Condition(self._lock)
        self._can_pop = threading.Condition(self._lock)
        self._done = False

    @property
    def max_size(self) -> int:
        return self._max_size

    def push(self, item: Any) -> None:
        """Add ``item``, waiting for room; raise QueueClosed once done."""
        with self._lock:
            self._can_push.wait_for(
                lambda: len(self._items) < self._max_size or self._done
            )
            if self._done:
                raise QueueClosed("queue is done")
            self._items.append(item)
            self._can_pop.notify()

    def pop(self) -> Any:
        """Return the oldest item, waiting for one; raise QueueClosed once done."""
        with self._lock:
            self._can_pop.wait_for(lambda: self._items or self._done)
            if self._done:
                raise QueueClosed("queue is done")
            item = self._items.popleft()
            self._can_push.notify()
            return item

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def empty(self) -> bool:
        with self._lock:
            return not self._items

    def done(self) -> None:
        """Wake every waiter; further pushes and pops raise QueueClosed."""
        with self._lock:
            self._done = True
            self._can_push.notify_all()
            self._can_pop.notify_all()


class ThreadPool:
    """A fixed set of worker threads running submitted callables in order."""

    def __init__(self, thread_count: Optional[int] = None) -> None:
        if thread_count is None:
            thread_count = os.cpu_count() or 1
        if thread_count <= 0:
            raise ValueError("bad thread count! must be non-zero!")
        self._queue = UnboundedQueue()
        self._closed = False
        self._close_lock = threading.Lock()
        self._threads = [
            threading.Thread(target=self._worker, daemon=True)
            for _ in range(thread_count)
        ]
        for thread in self._threads:
            thread.start()

    @property
    def thread_count(self) -> int:
        return len(self._threads)

    def _worker(self) -> None:
        while True:
            work = self._queue.pop()
            if work is None:
                break
            try:
                work()
            except Exception:
                _log.exception("work item raised")

    def do_work(self, work: Callable[[], Any]) -> None:
        """Queue ``work`` to run on one of the workers."""
        if not callable(work):
            raise TypeError("work must be callable")
        with self._close_lock:
            if self._closed:
                raise RuntimeError("thread pool is shut down")
            self._queue.push(work)

    def shutdown(self) -> None:
        """Run all queued work to completion and stop the workers."""
        with self._close_lock:
            if self._closed:
                return
            self._closed = True
            for _ in self._threads:
                self._queue.push(None)
        for thread in self._threads:
            thread.join()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, *args) -> None:
        self.shutdown()