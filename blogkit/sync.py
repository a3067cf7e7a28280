"""Small synchronisation primitives: spinlock, events and a counting semaphore."""

from __future__ import annotations

import threading
import time
from typing import Optional


class Spinlock:
    """A lock that busy-waits instead of sleeping while it is held elsewhere."""

    def __init__(self) -> None:
        self._flag = threading.Lock()

    def lock(self) -> None:
        while not self._flag.acquire(blocking=False):
            time.sleep(0)

    def unlock(self) -> None:
        self._flag.release()

    def __enter__(self) -> "Spinlock":
        self.lock()
        return self

    def __exit__(self, *args) -> None:
        self.unlock()


class ManualEvent:
    """An event that stays signalled and releases every waiter."""

    def __init__(self, state: bool = False) -> None:
        self._signaled = state
        self._cv = threading.Condition()

    def signal(self) -> None:
        with self._cv:
            self._signaled = True
            self._cv.notify_all()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Wait until signalled; return False if ``timeout`` ran out first."""
        with self._cv:
            return self._cv.wait_for(lambda: self._signaled, timeout)


class AutoEvent:
    """An event that releases one waiter and resets itself."""

    def __init__(self, state: bool = False) -> None:
        self._signaled = state
        self._cv = threading.Condition()

    def signal(self) -> None:
        with self._cv:
            self._signaled = True
            self._cv.notify()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Wait until signalled and consume the signal; False on timeout."""
        with self._cv:
            if not self._cv.wait_for(lambda: self._signaled, timeout):
                return False
            self._signaled = False
            return True


class Semaphore:
    """A counting semaphore."""

    def __init__(self, count: int = 0) -> None:
        if count < 0:
            raise ValueError("Initial count must not be negative!")
        self._count = count
        self._cv = threading.Condition()

    def post(self, count: int = 1) -> None:
        """Add ``count`` permits and wake waiters."""
        if count <= 0:
            raise ValueError("don't be silly!")
        with self._cv:
            self._count += count
            if count == 1:
                self._cv.notify()
            else:
                self._cv.notify_all()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Take one permit; return False if ``timeout`` ran out first."""
        with self._cv:
            if not self._cv.wait_for(lambda: self._count > 0, timeout):
                return False
            self._count -= 1
            return True