"""SelectionMachine - hover, hold-to-confirm, fire once."""
from __future__ import annotations

from typing import TYPE_CHECKING

from blade_select.components import Phase, Target, hit_test

if TYPE_CHECKING:
    from blade_gesture import Pointer


class SelectionMachine:
    """IDLE → HOVERING(id) → HOLDING(id, start) → CONFIRMED(id).

    While holding, ``progress = min(100, elapsed / hold_ms * 100)``. Reaching
    100 confirms and returns the target id from that one update; the machine
    then stays CONFIRMED without firing again until the grab is released or
    the hover moves. Any release, hover change or hover loss discards the
    accumulated hold.
    """

    def __init__(self, hold_ms: float, targets: list[Target] | None = None) -> None:
        if hold_ms <= 0:
            raise ValueError("hold_ms must be positive")
        self.hold_ms = hold_ms
        self.targets: list[Target] = list(targets or [])
        self.phase = Phase.IDLE
        self.target_id: str | None = None
        self.started_at: float = 0.0
        self.progress: float = 0.0

    def set_targets(self, targets: list[Target]) -> None:
        self.targets = list(targets)
        if self.target_id is not None and all(t.id != self.target_id for t in targets):
            self.reset()

    def reset(self) -> None:
        self.phase = Phase.IDLE
        self.target_id = None
        self.started_at = 0.0
        self.progress = 0.0

    def update(self, pointer: Pointer | None, now_ms: float) -> str | None:
        """Hit-test the pointer against ``targets`` and advance."""
        position = pointer.position if pointer is not None else None
        hovered = hit_test(self.targets, position)
        grabbing = pointer is not None and pointer.grabbing
        return self.advance(hovered.id if hovered else None, grabbing, now_ms)

    def advance(self, hovered: str | None, grabbing: bool, now_ms: float) -> str | None:
        """Advance with an already resolved hover. Returns a newly confirmed id."""
        if hovered is None:
            self.reset()
            return None

        if hovered != self.target_id or not grabbing:
            self.phase = Phase.HOVERING
            self.target_id = hovered
            self.progress = 0.0
            if not grabbing:
                return None

        if self.phase is Phase.CONFIRMED:
            return None

        if self.phase is Phase.HOVERING:
            self.phase = Phase.HOLDING
            self.started_at = now_ms

        elapsed = now_ms - self.started_at
        self.progress = min(100.0, elapsed / self.hold_ms * 100.0)
        if self.progress >= 100.0:
            self.phase = Phase.CONFIRMED
            return self.target_id
        return None
