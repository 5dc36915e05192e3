"""Frame clock for the fixed-timestep engine."""

import random
from typing import Callable

from blade.types import FrameContext


class FrameClock:
    def __init__(self, fps: int) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._dt = 1.0 / fps
        self._frame = 0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def now_ms(self) -> float:
        # Integer product first keeps whole-second marks exact.
        return self._frame * 1000 / self._fps

    def advance(self) -> int:
        self._frame += 1
        return self._frame

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> FrameContext:
        return FrameContext(
            frame=self._frame,
            dt=self._dt,
            now_ms=self.now_ms,
            request_stop=stop_fn,
            random=rng,
        )

    def reset(self, frame: int = 0) -> None:
        self._frame = frame
