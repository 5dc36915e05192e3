"""blade-score - Blade path collision, hit resolution and life losses."""
from __future__ import annotations

from blade_score.path import Segment, blade_path, path_hits
from blade_score.scorer import Scorer
from blade_score.systems import make_guard_system, make_slice_system

__all__ = [
    "Scorer",
    "Segment",
    "blade_path",
    "make_guard_system",
    "make_slice_system",
    "path_hits",
]
