"""blade-session - Round controller: calibration, play clock, end and exit."""
from __future__ import annotations

from blade_session.components import Notice, Phase, RoundResult
from blade_session.controller import EXIT_TARGET, SessionController
from blade_session.notices import NoticeBoard, make_notice_system
from blade_session.systems import level_progress, make_play_clock_system

__all__ = [
    "EXIT_TARGET",
    "Notice",
    "NoticeBoard",
    "Phase",
    "RoundResult",
    "SessionController",
    "level_progress",
    "make_notice_system",
    "make_play_clock_system",
]
