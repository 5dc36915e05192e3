"""Blade trail: recent pointer samples, newest first."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class TrailSample:
    x: float
    y: float
    t_ms: float

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


class Trail:
    """Bounded by ``max_length`` samples and, optionally, ``max_age_ms``."""

    def __init__(self, max_length: int = 12, max_age_ms: float | None = None) -> None:
        if max_length < 1:
            raise ValueError("max_length must be at least 1")
        self._max_age_ms = max_age_ms
        self._samples: deque[TrailSample] = deque(maxlen=max_length)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[TrailSample]:
        return iter(self._samples)

    def __getitem__(self, index: int) -> TrailSample:
        return self._samples[index]

    def push(self, x: float, y: float, now_ms: float) -> None:
        self._samples.appendleft(TrailSample(x, y, now_ms))
        self.evict(now_ms)

    def evict(self, now_ms: float) -> None:
        """Drop samples older than the age window. Oldest sit at the right."""
        if self._max_age_ms is None:
            return
        while self._samples and now_ms - self._samples[-1].t_ms > self._max_age_ms:
            self._samples.pop()

    def clear(self) -> None:
        self._samples.clear()

    def head(self) -> TrailSample | None:
        return self._samples[0] if self._samples else None

    def segment(self) -> tuple[TrailSample, TrailSample] | None:
        """The two most recent samples, newest first, or None."""
        if len(self._samples) < 2:
            return None
        return self._samples[0], self._samples[1]

    def points(self) -> list[tuple[float, float]]:
        return [s.position for s in self._samples]
