"""blade-gesture - Hand landmarks to pointer, grab state and blade trail."""
from __future__ import annotations

from blade_gesture.cell import LatestValue
from blade_gesture.landmarks import FINGER_PAIRS, LANDMARK_COUNT, HandLandmarks
from blade_gesture.pointer import Pointer, folded_fingers, is_grabbing, to_pointer
from blade_gesture.reader import GestureReader
from blade_gesture.systems import make_gesture_system
from blade_gesture.trail import Trail, TrailSample

__all__ = [
    "FINGER_PAIRS",
    "GestureReader",
    "HandLandmarks",
    "LANDMARK_COUNT",
    "LatestValue",
    "Pointer",
    "Trail",
    "TrailSample",
    "folded_fingers",
    "is_grabbing",
    "make_gesture_system",
    "to_pointer",
]
