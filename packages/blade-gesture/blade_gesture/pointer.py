"""Landmarks → pointer position and grab classification."""
from __future__ import annotations

from dataclasses import dataclass

from blade_gesture.landmarks import HandLandmarks

GRAB_MIN_FOLDED = 3


@dataclass(frozen=True, slots=True)
class Pointer:
    """Pointer in render-surface pixels, already mirrored for a selfie view."""

    x: float
    y: float
    grabbing: bool = False

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


def folded_fingers(landmarks: HandLandmarks) -> int:
    """Count fingers whose tip sits below (larger y) its knuckle."""
    return sum(1 for tip, mcp in landmarks.finger_pairs() if tip[1] > mcp[1])


def is_grabbing(landmarks: HandLandmarks, min_folded: int = GRAB_MIN_FOLDED) -> bool:
    return folded_fingers(landmarks) >= min_folded


def to_pointer(landmarks: HandLandmarks, width: float, height: float) -> Pointer:
    """Index fingertip mirrored horizontally and scaled to the surface."""
    nx, ny = landmarks.index_tip
    return Pointer(
        x=(1.0 - nx) * width,
        y=ny * height,
        grabbing=is_grabbing(landmarks),
    )
