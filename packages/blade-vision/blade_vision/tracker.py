"""HandTracker - MediaPipe Tasks hand landmarker in live-stream mode."""
from __future__ import annotations

import logging
import urllib.request
from pathlib import Path

import cv2
import mediapipe as mp
import numpy as np
from mediapipe.tasks import python
from mediapipe.tasks.python import vision

from blade_gesture import HandLandmarks, LatestValue

logger = logging.getLogger(__name__)

MODEL_URL = (
    "https://storage.googleapis.com/mediapipe-models/hand_landmarker/"
    "hand_landmarker/float16/1/hand_landmarker.task"
)
DEFAULT_MODEL_PATH = Path("hand_landmarker.task")


def ensure_model(path: str | Path = DEFAULT_MODEL_PATH, url: str = MODEL_URL) -> Path:
    """Download the landmarker model unless ``path`` already exists."""
    path = Path(path)
    if not path.exists():
        logger.info("downloading hand landmarker model to %s", path)
        path.parent.mkdir(parents=True, exist_ok=True)
        urllib.request.urlretrieve(url, path)
    return path


class HandTracker:
    """Runs detection asynchronously and writes each result to ``hands``.

    The landmarker calls back from its own thread; the callback only
    converts the first hand to ``HandLandmarks`` (or None) and stores it.
    """

    def __init__(
        self,
        model_path: str | Path,
        hands: LatestValue[HandLandmarks] | None = None,
        min_detection_confidence: float = 0.7,
        min_tracking_confidence: float = 0.7,
    ) -> None:
        self.model_path = Path(model_path)
        self.hands: LatestValue[HandLandmarks] = hands if hands is not None else LatestValue()
        self.min_detection_confidence = min_detection_confidence
        self.min_tracking_confidence = min_tracking_confidence
        self._landmarker: vision.HandLandmarker | None = None

    def open(self) -> HandTracker:
        if self._landmarker is not None:
            return self
        options = vision.HandLandmarkerOptions(
            base_options=python.BaseOptions(model_asset_path=str(self.model_path)),
            running_mode=vision.RunningMode.LIVE_STREAM,
            num_hands=1,
            min_hand_detection_confidence=self.min_detection_confidence,
            min_hand_presence_confidence=self.min_detection_confidence,
            min_tracking_confidence=self.min_tracking_confidence,
            result_callback=self._on_result,
        )
        self._landmarker = vision.HandLandmarker.create_from_options(options)
        logger.info("hand landmarker ready (%s)", self.model_path)
        return self

    def detect(self, frame: np.ndarray, timestamp_ms: int) -> None:
        if self._landmarker is None:
            self.open()
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        image = mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb)
        self._landmarker.detect_async(image, timestamp_ms)

    def close(self) -> None:
        if self._landmarker is not None:
            self._landmarker.close()
            self._landmarker = None

    def _on_result(self, result, output_image, timestamp_ms: int) -> None:
        if result.hand_landmarks:
            self.hands.put(HandLandmarks.from_points(result.hand_landmarks[0]))
        else:
            self.hands.put(None)
