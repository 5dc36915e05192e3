"""blade-vision - Camera capture, the detection worker and result photos.

The MediaPipe adapter lives in ``blade_vision.tracker`` and is imported
explicitly by programs that run live tracking.
"""
from __future__ import annotations

from blade_vision.camera import Camera, CameraError
from blade_vision.feed import Detector, HandFeed
from blade_vision.snapshot import from_data_url, snapshot_jpeg, to_data_url

__all__ = [
    "Camera",
    "CameraError",
    "Detector",
    "HandFeed",
    "from_data_url",
    "snapshot_jpeg",
    "to_data_url",
]
