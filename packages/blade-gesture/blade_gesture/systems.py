"""System factory for per-frame gesture ingestion."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from blade_gesture.cell import LatestValue
from blade_gesture.landmarks import HandLandmarks
from blade_gesture.reader import GestureReader

if TYPE_CHECKING:
    from blade import FrameContext, World


def make_gesture_system(
    cell: LatestValue[HandLandmarks],
    reader: GestureReader,
) -> Callable[[World, FrameContext], None]:
    def gesture_system(world: World, ctx: FrameContext) -> None:
        reader.update(cell, ctx.now_ms)

    return gesture_system
