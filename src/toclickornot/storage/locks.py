"""Per-key mutual exclusion for session updates.

A click reads a session, mutates it and writes it back. Two clicks for the
same key must not interleave, while clicks for different keys run freely.
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class _KeyLock:
    """A lock plus the number of callers holding or waiting on it."""

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class KeyedLocks:
    """Registry handing out one lock per session key.

    A key's lock exists only while some caller holds or waits on it, so the
    registry stays as small as the number of keys in flight.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, _KeyLock] = {}

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        """Hold the lock for key for the duration of the block."""
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = _KeyLock()
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
