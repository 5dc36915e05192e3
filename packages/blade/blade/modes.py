"""Game modes and the rules that differ between them."""
from __future__ import annotations

import enum
from dataclasses import dataclass


class Mode(enum.Enum):
    TIMED = "timed"
    SURVIVAL = "survival"
    DODGE = "dodge"


@dataclass(frozen=True)
class ModeRules:
    """Per-mode switches consulted by the scoring and session systems.

    Attributes:
        life_limited: The round ends when lives reach zero.
        penalize_misses: A whole fruit leaving the bottom edge costs a life.
        time_limited: A countdown runs and ends the round at zero.
        score_seconds: Score is survival time in seconds instead of points.
        protect_target: A fixed target sits at the centre of the playfield and
            any whole item reaching it costs a life.
    """

    life_limited: bool = False
    penalize_misses: bool = False
    time_limited: bool = False
    score_seconds: bool = False
    protect_target: bool = False


RULES: dict[Mode, ModeRules] = {
    Mode.TIMED: ModeRules(time_limited=True),
    Mode.SURVIVAL: ModeRules(life_limited=True, penalize_misses=True),
    Mode.DODGE: ModeRules(life_limited=True, score_seconds=True, protect_target=True),
}


def rules_for(mode: Mode) -> ModeRules:
    return RULES[mode]
