"""blade-select - Hover and hold-to-confirm selection for gesture menus."""
from __future__ import annotations

from blade_select.calibration import CalibrationGauge
from blade_select.components import Phase, Target, hit_test
from blade_select.machine import SelectionMachine

__all__ = ["CalibrationGauge", "Phase", "SelectionMachine", "Target", "hit_test"]
