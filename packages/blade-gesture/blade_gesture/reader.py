"""GestureReader - turns the latest perception result into pointer and trail."""
from __future__ import annotations

import logging

from blade_gesture.cell import LatestValue
from blade_gesture.landmarks import HandLandmarks
from blade_gesture.pointer import Pointer, to_pointer
from blade_gesture.trail import Trail

logger = logging.getLogger(__name__)


class GestureReader:
    """Consumer side of the perception cell, read once per frame.

    A new result (by sequence number) moves the pointer and prepends a trail
    sample. An absent hand clears pointer and trail at once so a stale trail
    can never slice. When no new result arrives for ``stale_frames`` frames
    the hand is treated as absent as well.
    """

    def __init__(
        self,
        width: float,
        height: float,
        trail: Trail | None = None,
        stale_frames: int = 15,
    ) -> None:
        self.width = width
        self.height = height
        self.trail = trail if trail is not None else Trail()
        self.pointer: Pointer | None = None
        self._stale_frames = stale_frames
        self._last_sequence = 0
        self._quiet_frames = 0

    @property
    def grabbing(self) -> bool:
        return self.pointer is not None and self.pointer.grabbing

    @property
    def position(self) -> tuple[float, float] | None:
        return self.pointer.position if self.pointer is not None else None

    def update(self, cell: LatestValue[HandLandmarks], now_ms: float) -> Pointer | None:
        sequence, hand = cell.read()
        if sequence != self._last_sequence:
            self._last_sequence = sequence
            self._quiet_frames = 0
            self.ingest(hand, now_ms)
        else:
            self._quiet_frames += 1
            if self._quiet_frames > self._stale_frames and self.pointer is not None:
                logger.debug("no perception result for %d frames", self._quiet_frames)
                self.lose()
        self.trail.evict(now_ms)
        return self.pointer

    def ingest(self, hand: HandLandmarks | None, now_ms: float) -> None:
        if hand is None:
            self.lose()
            return
        self.pointer = to_pointer(hand, self.width, self.height)
        self.trail.push(self.pointer.x, self.pointer.y, now_ms)

    def lose(self) -> None:
        self.pointer = None
        self.trail.clear()
