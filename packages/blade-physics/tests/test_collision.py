"""Tests for pure intersection functions."""
from __future__ import annotations

import math
import random

from blade_physics.collision import (
    closest_point_on_segment,
    point_in_circle,
    point_in_rect,
    random_range,
    segment_hits_circle,
)


# ── point_in_circle ──────────────────────────────────────────────


class TestPointInCircle:
    def test_inside(self) -> None:
        assert point_in_circle((1.0, 1.0), (0.0, 0.0), 2.0)

    def test_on_boundary_counts(self) -> None:
        assert point_in_circle((3.0, 4.0), (0.0, 0.0), 5.0)

    def test_outside(self) -> None:
        assert not point_in_circle((3.0, 4.1), (0.0, 0.0), 5.0)


# ── point_in_rect ────────────────────────────────────────────────


class TestPointInRect:
    def test_inside_and_edges(self) -> None:
        rect = (10.0, 20.0, 100.0, 50.0)
        assert point_in_rect((50.0, 40.0), rect)
        assert point_in_rect((10.0, 20.0), rect)
        assert point_in_rect((110.0, 70.0), rect)

    def test_outside(self) -> None:
        rect = (10.0, 20.0, 100.0, 50.0)
        assert not point_in_rect((9.9, 40.0), rect)
        assert not point_in_rect((50.0, 70.1), rect)


# ── segment_hits_circle ──────────────────────────────────────────


class TestSegmentHitsCircle:
    def test_center_within_radius_of_segment_interior(self) -> None:
        # Perpendicular distance 5 < radius 10, both endpoints far away.
        assert segment_hits_circle((-100.0, 0.0), (100.0, 0.0), (0.0, 5.0), 10.0)

    def test_perpendicular_distance_exceeds_radius(self) -> None:
        assert not segment_hits_circle((-100.0, 0.0), (100.0, 0.0), (0.0, 10.5), 10.0)

    def test_fast_slash_through_center_with_endpoints_outside(self) -> None:
        a, b, c = (0.0, 0.0), (400.0, 400.0), (200.0, 200.0)
        assert not point_in_circle(a, c, 80.0)
        assert not point_in_circle(b, c, 80.0)
        assert segment_hits_circle(a, b, c, 80.0)

    def test_projection_beyond_endpoint(self) -> None:
        # Circle lies on the segment's line but past the end.
        assert not segment_hits_circle((0.0, 0.0), (10.0, 0.0), (30.0, 0.0), 10.0)
        assert segment_hits_circle((0.0, 0.0), (10.0, 0.0), (19.0, 0.0), 10.0)

    def test_zero_length_segment_is_point_test(self) -> None:
        assert segment_hits_circle((5.0, 5.0), (5.0, 5.0), (0.0, 0.0), 8.0)
        assert not segment_hits_circle((9.0, 9.0), (9.0, 9.0), (0.0, 0.0), 8.0)

    def test_endpoint_inside(self) -> None:
        assert segment_hits_circle((0.0, 0.0), (300.0, 0.0), (0.0, 3.0), 5.0)


def test_closest_point_clamps() -> None:
    assert closest_point_on_segment((0.0, 0.0), (10.0, 0.0), (-5.0, 3.0)) == (0.0, 0.0)
    assert closest_point_on_segment((0.0, 0.0), (10.0, 0.0), (4.0, 3.0)) == (4.0, 0.0)


def test_random_range_bounds() -> None:
    rng = random.Random(3)
    samples = [random_range(rng, 45.0, 80.0) for _ in range(500)]
    assert all(45.0 <= s < 80.0 for s in samples)
    assert not math.isclose(min(samples), max(samples))
