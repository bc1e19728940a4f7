"""
Per-key mutual exclusion for in-memory records.

The HTTP layer may run handlers on several worker threads.  Any
read-check-then-write sequence on a hotseat (capacity check followed by
an append) must hold that session's lock so two concurrent joins can
never both pass the capacity check.

Usage::

    with locks.hold(session_id):
        ...check and mutate the session...
"""

import threading
from contextlib import contextmanager
from typing import Dict, Iterator


class KeyedLocks:
    """Lazily created ``threading.Lock`` per key."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: Dict[str, threading.Lock] = {}

    def get(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        lock = self.get(key)
        with lock:
            yield
