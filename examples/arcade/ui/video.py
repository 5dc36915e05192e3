"""Camera frames and JPEG photos to pygame surfaces."""
from __future__ import annotations

import cv2
import numpy as np
import pygame


def frame_to_surface(frame: np.ndarray, size: tuple[int, int], mirror: bool = True) -> pygame.Surface:
    """BGR frame → RGB surface scaled to ``size``, mirrored for a selfie view."""
    if mirror:
        frame = cv2.flip(frame, 1)
    frame = cv2.resize(frame, size)
    rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
    # surfarray is indexed (x, y); OpenCV frames are (row, col).
    return pygame.surfarray.make_surface(np.ascontiguousarray(rgb.swapaxes(0, 1)))


def jpeg_to_surface(jpeg: bytes) -> pygame.Surface | None:
    image = cv2.imdecode(np.frombuffer(jpeg, dtype=np.uint8), cv2.IMREAD_COLOR)
    if image is None:
        return None
    h, w = image.shape[:2]
    return frame_to_surface(image, (w, h), mirror=False)
