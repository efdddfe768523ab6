"""Non-blocking render guard.

A render request that finds the guard held is dropped, not queued: bounded
staleness is preferred over piling requests up against a slow API.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class RenderGuard:
    """Binary mutual-exclusion flag with try-acquire semantics."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.dropped = 0

    @property
    def busy(self) -> bool:
        """Return True while a render holds the guard."""
        return self._lock.locked()

    def try_acquire(self) -> bool:
        """Acquire the guard without waiting; False if it is already held."""
        acquired = self._lock.acquire(blocking=False)
        if not acquired:
            self.dropped += 1
        return acquired

    def release(self) -> None:
        """Release a held guard."""
        self._lock.release()

    @contextmanager
    def attempt(self) -> Iterator[bool]:
        """Context manager yielding whether the guard was acquired.

        Example:
            >>> with guard.attempt() as acquired:
            ...     if not acquired:
            ...         return
        """
        acquired = self.try_acquire()
        try:
            yield acquired
        finally:
            if acquired:
                self.release()
