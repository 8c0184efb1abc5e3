"""Request generation counter for discarding stale extraction results."""
from __future__ import annotations

import threading


class RequestGeneration:
    """Monotonically increasing counter owned by the caller of the pipeline.

    Take a generation with next() before starting an extraction and drop the
    result if is_current() is False once it arrives.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current = 0

    def next(self) -> int:
        with self._lock:
            self._current += 1
            return self._current

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._current

    @property
    def current(self) -> int:
        with self._lock:
            return self._current
