"""Camera - scoped OpenCV capture."""
from __future__ import annotations

import logging

import cv2
import numpy as np

logger = logging.getLogger(__name__)


class CameraError(RuntimeError):
    """The capture device could not be opened (missing, busy or denied)."""


class Camera:
    """A ``cv2.VideoCapture`` that is released however the scope ends.

    ``open`` raises ``CameraError`` instead of retrying; the caller decides
    what to show the player.
    """

    def __init__(self, index: int = 0, width: int = 1280, height: int = 720) -> None:
        self.index = index
        self.width = width
        self.height = height
        self._capture: cv2.VideoCapture | None = None

    @property
    def is_open(self) -> bool:
        return self._capture is not None

    def open(self) -> Camera:
        if self._capture is not None:
            return self
        capture = cv2.VideoCapture(self.index)
        if not capture.isOpened():
            capture.release()
            logger.error("camera %d could not be opened", self.index)
            raise CameraError(f"camera {self.index} is unavailable or busy")
        capture.set(cv2.CAP_PROP_FRAME_WIDTH, self.width)
        capture.set(cv2.CAP_PROP_FRAME_HEIGHT, self.height)
        self._capture = capture
        logger.info("camera %d opened", self.index)
        return self

    def read(self) -> np.ndarray | None:
        """Next BGR frame, or None when the device returned nothing."""
        if self._capture is None:
            return None
        ok, frame = self._capture.read()
        return frame if ok else None

    def release(self) -> None:
        if self._capture is None:
            return
        self._capture.release()
        self._capture = None
        logger.info("camera %d released", self.index)

    def __enter__(self) -> Camera:
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.release()
