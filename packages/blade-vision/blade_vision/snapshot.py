"""Result photo: a small mirrored JPEG of the current camera frame."""
from __future__ import annotations

import base64
import logging

import cv2
import numpy as np

logger = logging.getLogger(__name__)

PHOTO_SIZE = (400, 300)
PHOTO_QUALITY = 80


def snapshot_jpeg(
    frame: np.ndarray | None,
    size: tuple[int, int] = PHOTO_SIZE,
    quality: int = PHOTO_QUALITY,
) -> bytes | None:
    """Mirror, scale to ``size`` (width, height) and JPEG-encode ``frame``."""
    if frame is None:
        return None
    mirrored = cv2.flip(frame, 1)
    small = cv2.resize(mirrored, size, interpolation=cv2.INTER_AREA)
    ok, buf = cv2.imencode(".jpg", small, [cv2.IMWRITE_JPEG_QUALITY, quality])
    if not ok:
        logger.warning("snapshot encoding failed")
        return None
    return buf.tobytes()


def to_data_url(jpeg: bytes) -> str:
    return "data:image/jpeg;base64," + base64.b64encode(jpeg).decode("ascii")


def from_data_url(url: str) -> bytes:
    _, _, payload = url.partition(",")
    return base64.b64decode(payload)
