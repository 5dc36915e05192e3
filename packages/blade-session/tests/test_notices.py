"""Tests for the NoticeBoard."""
from __future__ import annotations

from blade import GameConfig, SignalBus, signals
from blade_session import NoticeBoard


def test_notice_expires_and_fades() -> None:
    board = NoticeBoard(GameConfig(notice_frames=4))
    board.show("MISS!")
    board.tick()
    assert board.current.opacity == 0.75
    for _ in range(3):
        board.tick()
    assert board.current is None


def test_newer_notice_replaces() -> None:
    board = NoticeBoard(GameConfig())
    board.show("MISS!")
    board.show("FREEZE!")
    assert board.current.text == "FREEZE!"


def test_signals_raise_notices() -> None:
    bus = SignalBus()
    board = NoticeBoard(GameConfig())
    board.attach(bus)
    bus.publish(signals.BOMB, penalty=5)
    bus.flush()
    assert board.current.text == "BOMB! -5"
    bus.publish(signals.COMBO, multiplier=3)
    bus.flush()
    assert board.current.text == "COMBO x3!"
    bus.publish(signals.ROUND_START, mode=None)
    bus.flush()
    assert board.current.text == "START!"
    assert board.current.total_frames == 240
