"""Blade path extraction from the pointer trail."""
from __future__ import annotations

from blade.config import BLADE_SEGMENT
from blade_gesture import Trail
from blade_physics import segment_hits_circle

Segment = tuple[tuple[float, float], tuple[float, float]]


def blade_path(trail: Trail, mode: str = BLADE_SEGMENT) -> Segment | None:
    """The path tested against items this frame, or None without a hand.

    Segment mode spans the two most recent samples. Point mode, and segment
    mode with a single sample, yield a zero-length segment at the newest
    sample so the same intersection test covers both.
    """
    head = trail.head()
    if head is None:
        return None
    if mode == BLADE_SEGMENT:
        pair = trail.segment()
        if pair is not None:
            newest, previous = pair
            return newest.position, previous.position
    return head.position, head.position


def path_hits(path: Segment, center: tuple[float, float], radius: float) -> bool:
    a, b = path
    return segment_hits_circle(a, b, center, radius)
