"""Fixed-size hand landmark set with named joints."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

LANDMARK_COUNT = 21

WRIST = 0
THUMB_TIP = 4
INDEX_MCP = 5
INDEX_TIP = 8
MIDDLE_MCP = 9
MIDDLE_TIP = 12
RING_MCP = 13
RING_TIP = 16
PINKY_MCP = 17
PINKY_TIP = 20

# (fingertip, knuckle) for index, middle, ring and pinky.
FINGER_PAIRS: tuple[tuple[int, int], ...] = (
    (INDEX_TIP, INDEX_MCP),
    (MIDDLE_TIP, MIDDLE_MCP),
    (RING_TIP, RING_MCP),
    (PINKY_TIP, PINKY_MCP),
)


@dataclass(frozen=True, slots=True)
class HandLandmarks:
    """21 normalized (x, y) points in image coordinates, y growing downward."""

    points: tuple[tuple[float, float], ...]

    def __post_init__(self) -> None:
        if len(self.points) != LANDMARK_COUNT:
            raise ValueError(
                f"expected {LANDMARK_COUNT} landmarks, got {len(self.points)}"
            )

    @classmethod
    def from_points(cls, points: Iterable[Any]) -> HandLandmarks:
        """Build from any sequence of objects exposing ``.x`` and ``.y``.

        MediaPipe's ``NormalizedLandmark`` fits; so does a plain tuple pair
        via ``from_xy``.
        """
        return cls(tuple((float(p.x), float(p.y)) for p in points))

    @classmethod
    def from_xy(cls, points: Iterable[tuple[float, float]]) -> HandLandmarks:
        return cls(tuple((float(x), float(y)) for x, y in points))

    def __getitem__(self, index: int) -> tuple[float, float]:
        return self.points[index]

    @property
    def index_tip(self) -> tuple[float, float]:
        return self.points[INDEX_TIP]

    @property
    def wrist(self) -> tuple[float, float]:
        return self.points[WRIST]

    def finger_pairs(self) -> list[tuple[tuple[float, float], tuple[float, float]]]:
        return [(self.points[tip], self.points[mcp]) for tip, mcp in FINGER_PAIRS]
