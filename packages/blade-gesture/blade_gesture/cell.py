"""Single-producer / single-consumer latest-value cell."""
from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class LatestValue(Generic[T]):
    """Holds only the most recent value written by a producer thread.

    ``read`` never waits for a fresh value: it returns the current
    ``(sequence, value)`` pair, where ``sequence`` increments on every
    ``put`` so a consumer can tell new data from a repeat.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: T | None = None
        self._sequence = 0

    def put(self, value: T | None) -> None:
        with self._lock:
            self._value = value
            self._sequence += 1

    def read(self) -> tuple[int, T | None]:
        with self._lock:
            return self._sequence, self._value

    @property
    def sequence(self) -> int:
        with self._lock:
            return self._sequence
