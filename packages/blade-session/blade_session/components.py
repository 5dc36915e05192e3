"""Session phases, the round result and transient notices."""
from __future__ import annotations

import enum
from dataclasses import dataclass

from blade import Mode


class Phase(enum.Enum):
    CALIBRATING = "calibrating"
    PLAYING = "playing"
    ENDED = "ended"
    EXITED = "exited"


@dataclass(frozen=True)
class RoundResult:
    """Handed to the leaderboard once a round ends.

    ``photo`` is a JPEG of the camera frame at the moment the round ended,
    or None when no frame was available. ``timestamp`` is wall-clock epoch
    seconds.
    """

    score: float
    mode: Mode
    photo: bytes | None
    timestamp: float
    reason: str = ""


@dataclass
class Notice:
    text: str
    frames_left: int
    total_frames: int

    @property
    def opacity(self) -> float:
        return self.frames_left / self.total_frames
