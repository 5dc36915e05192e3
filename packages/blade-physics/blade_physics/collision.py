"""Pure intersection tests and random sampling used by the slice engine."""
from __future__ import annotations

import random

from blade_physics import vec
from blade_physics.vec import Vec

Rect = tuple[float, float, float, float]


def point_in_circle(point: Vec, center: Vec, radius: float) -> bool:
    """Inclusive: a point exactly on the circle counts as inside."""
    return vec.distance_sq(point, center) <= radius * radius


def point_in_rect(point: Vec, rect: Rect) -> bool:
    """Inclusive test against an (x, y, w, h) rectangle."""
    x, y, w, h = rect
    return x <= point[0] <= x + w and y <= point[1] <= y + h


def closest_point_on_segment(a: Vec, b: Vec, point: Vec) -> Vec:
    ab = vec.sub(b, a)
    len_sq = vec.length_sq(ab)
    if len_sq == 0.0:
        return a
    t = vec.dot(vec.sub(point, a), ab) / len_sq
    t = max(0.0, min(1.0, t))
    return vec.lerp(a, b, t)


def segment_hits_circle(a: Vec, b: Vec, center: Vec, radius: float) -> bool:
    """True when any point of segment ab lies within ``radius`` of ``center``.

    Catches fast slashes whose endpoints both land outside the circle but
    whose path crosses it. A zero-length segment degrades to a point test.
    """
    closest = closest_point_on_segment(a, b, center)
    return point_in_circle(closest, center, radius)


def random_range(rng: random.Random, lo: float, hi: float) -> float:
    return rng.random() * (hi - lo) + lo
