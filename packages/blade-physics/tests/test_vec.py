"""Tests for 2D vector helpers."""
from __future__ import annotations

import math

from blade_physics import vec


def test_add_sub_scale() -> None:
    assert vec.add((1.0, 2.0), (3.0, 4.0)) == (4.0, 6.0)
    assert vec.sub((1.0, 2.0), (3.0, 4.0)) == (-2.0, -2.0)
    assert vec.scale((1.5, -2.0), 2.0) == (3.0, -4.0)


def test_lengths_and_distance() -> None:
    assert vec.length((3.0, 4.0)) == 5.0
    assert vec.length_sq((3.0, 4.0)) == 25.0
    assert vec.distance((1.0, 1.0), (4.0, 5.0)) == 5.0
    assert vec.distance_sq((1.0, 1.0), (4.0, 5.0)) == 25.0


def test_dot_and_lerp() -> None:
    assert vec.dot((1.0, 0.0), (0.0, 1.0)) == 0.0
    x, y = vec.lerp((0.0, 0.0), (10.0, 20.0), 0.25)
    assert math.isclose(x, 2.5)
    assert math.isclose(y, 5.0)
