from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from .base import Store


class InMemoryStore(Store):
    """Process-local store guarded by a reentrant lock.

    Useful for tests and for workflows whose state string is embedded in some
    other record that the caller saves afterwards.
    """

    def __init__(self, state: str = "") -> None:
        super().__init__(state)
        self._lock = threading.RLock()

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        with self._lock:
            yield

    def write_state(self, value: str) -> None:
        with self._lock:
            self._state = value
