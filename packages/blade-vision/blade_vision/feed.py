"""HandFeed - camera reads and hand detection on a worker thread."""
from __future__ import annotations

import logging
import threading
import time
from typing import Protocol

import numpy as np

from blade_gesture import LatestValue
from blade_vision.camera import Camera

logger = logging.getLogger(__name__)


class Detector(Protocol):
    def detect(self, frame: np.ndarray, timestamp_ms: int) -> None: ...

    def close(self) -> None: ...


class HandFeed:
    """Producer side of the perception cells.

    The worker reads a frame, publishes it to ``frames`` and hands it to the
    detector, whose own callback publishes hands. The game tick only ever
    reads the cells. Leaving the ``with`` block stops the worker, closes the
    detector and releases the camera, in that order.
    """

    def __init__(
        self,
        camera: Camera,
        detector: Detector,
        interval_s: float = 1 / 30,
    ) -> None:
        self.camera = camera
        self.detector = detector
        self.interval_s = interval_s
        self.frames: LatestValue[np.ndarray] = LatestValue()
        self.error: BaseException | None = None
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def latest_frame(self) -> np.ndarray | None:
        return self.frames.read()[1]

    def start(self) -> None:
        if self._thread is not None:
            return
        self.camera.open()
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="hand-feed", daemon=True)
        self._thread.start()

    def stop(self, timeout: float = 1.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            if self._thread.is_alive():
                logger.warning("hand feed worker did not stop within %.1fs", timeout)
            self._thread = None

    def close(self) -> None:
        try:
            self.stop()
            self.detector.close()
        finally:
            self.camera.release()

    def __enter__(self) -> HandFeed:
        try:
            self.start()
        except BaseException:
            self.close()
            raise
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _run(self) -> None:
        started = time.monotonic()
        last_ts = -1
        try:
            while not self._stop.is_set():
                frame = self.camera.read()
                if frame is not None:
                    self.frames.put(frame)
                    # Detector timestamps must strictly increase.
                    ts = max(last_ts + 1, int((time.monotonic() - started) * 1000))
                    self.detector.detect(frame, ts)
                    last_ts = ts
                self._stop.wait(self.interval_s)
        except Exception as exc:
            self.error = exc
            logger.exception("hand feed worker stopped")
