"""CalibrationGauge - forgiving fill/decay gate before a round starts."""
from __future__ import annotations

from blade_physics import vec


class CalibrationGauge:
    """Accumulates while the pointer rests inside a central circle.

    Inside: ``+fill`` units per frame. Outside or no hand: ``-decay`` units,
    never below zero. ``units`` accumulated units equal 100%. Completion
    latches: later frames cannot un-calibrate.
    """

    def __init__(
        self,
        center: tuple[float, float],
        radius: float,
        fill: float = 1.5,
        decay: float = 1.0,
        units: float = 45.0,
    ) -> None:
        self.center = center
        self.radius = radius
        self.fill = fill
        self.decay = decay
        self.units = units
        self.accumulated = 0.0
        self.complete = False

    @property
    def progress(self) -> float:
        return min(100.0, self.accumulated / self.units * 100.0)

    def inside(self, position: tuple[float, float] | None) -> bool:
        if position is None:
            return False
        return vec.distance(position, self.center) < self.radius

    def update(self, position: tuple[float, float] | None) -> float:
        if self.complete:
            return 100.0
        if self.inside(position):
            self.accumulated += self.fill
        else:
            self.accumulated = max(0.0, self.accumulated - self.decay)
        if self.progress >= 100.0:
            self.complete = True
        return self.progress
