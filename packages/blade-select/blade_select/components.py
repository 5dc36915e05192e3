"""Selection targets and machine phases."""
from __future__ import annotations

import enum
from dataclasses import dataclass

from blade_physics.collision import Rect, point_in_rect


class Phase(enum.Enum):
    IDLE = "idle"
    HOVERING = "hovering"
    HOLDING = "holding"
    CONFIRMED = "confirmed"


@dataclass(frozen=True)
class Target:
    """A UI hit region. ``rect`` is (x, y, w, h) in surface pixels."""

    id: str
    rect: Rect

    def contains(self, point: tuple[float, float]) -> bool:
        return point_in_rect(point, self.rect)


def hit_test(targets: list[Target], point: tuple[float, float] | None) -> Target | None:
    """First target containing ``point``; an absent pointer hovers nothing."""
    if point is None:
        return None
    for target in targets:
        if target.contains(point):
            return target
    return None
