"""Tests for CalibrationGauge."""
import pytest

from blade_select import CalibrationGauge


@pytest.fixture
def gauge() -> CalibrationGauge:
    return CalibrationGauge(center=(640.0, 360.0), radius=80.0, fill=1.5, decay=1.0, units=45.0)


def test_fills_inside(gauge) -> None:
    for _ in range(29):
        gauge.update((650.0, 370.0))
    assert not gauge.complete
    assert gauge.update((650.0, 370.0)) == 100.0
    assert gauge.complete


def test_decays_gradually_outside(gauge) -> None:
    for _ in range(10):
        gauge.update((640.0, 360.0))
    assert gauge.accumulated == 15.0
    gauge.update((0.0, 0.0))
    assert gauge.accumulated == 14.0
    gauge.update(None)
    assert gauge.accumulated == 13.0
    assert gauge.progress == pytest.approx(13.0 / 45.0 * 100.0)


def test_never_below_zero(gauge) -> None:
    gauge.update(None)
    assert gauge.accumulated == 0.0


def test_rim_is_outside(gauge) -> None:
    assert not gauge.inside((720.0, 360.0))
    assert gauge.inside((719.0, 360.0))


def test_complete_latches(gauge) -> None:
    for _ in range(30):
        gauge.update((640.0, 360.0))
    assert gauge.update(None) == 100.0
    assert gauge.complete
