"""Thread-safe incremental identifiers for orders."""

from __future__ import annotations

import itertools
import threading


class IdGenerator:
    """Hands out 1, 2, 3, ... and never repeats a value."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def next_value(self) -> int:
        with self._lock:
            return next(self._counter)
