"""blade-physics - 2D geometry tests and ballistic motion for the blade engine."""
from __future__ import annotations

from blade_physics import vec
from blade_physics.collision import (
    closest_point_on_segment,
    point_in_circle,
    point_in_rect,
    random_range,
    segment_hits_circle,
)
from blade_physics.systems import (
    make_bounds_system,
    make_motion_system,
    make_wall_system,
    speed_modifier,
)

__all__ = [
    "closest_point_on_segment",
    "make_bounds_system",
    "make_motion_system",
    "make_wall_system",
    "point_in_circle",
    "point_in_rect",
    "random_range",
    "segment_hits_circle",
    "speed_modifier",
    "vec",
]
