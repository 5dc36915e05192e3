"""Tests for FrameClock."""
import random

import pytest

from blade.clock import FrameClock


def test_rejects_non_positive_fps():
    with pytest.raises(ValueError):
        FrameClock(0)
    with pytest.raises(ValueError):
        FrameClock(-30)


def test_advance_and_now_ms():
    clock = FrameClock(60)
    assert clock.now_ms == 0
    for _ in range(180):
        clock.advance()
    assert clock.frame == 180
    assert clock.now_ms == 3000.0


def test_context_snapshot():
    clock = FrameClock(50)
    clock.advance()
    ctx = clock.context(lambda: None, random.Random(1))
    assert ctx.frame == 1
    assert ctx.dt == pytest.approx(0.02)
    assert ctx.now_ms == pytest.approx(20.0)


def test_reset():
    clock = FrameClock(60)
    clock.advance()
    clock.reset(10)
    assert clock.frame == 10
