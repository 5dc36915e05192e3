"""SessionState - score, lives, time and effect bookkeeping for one round."""
from __future__ import annotations

from dataclasses import dataclass, field

from blade.modes import Mode, ModeRules, rules_for


@dataclass
class SessionState:
    """Mutable round state. Every mutator is a no-op once ``game_over`` is set.

    ``score`` is an integer point total, or survival seconds in modes whose
    rules set ``score_seconds``.
    """

    mode: Mode
    lives: int = 0
    time_left: int = 0
    score: float = 0
    difficulty: float = 1.0
    combo: int = 0
    multiplier: int = 1
    paused_until_ms: float = 0.0
    freeze_left: int = 0
    play_frames: int = 0
    last_spawn_frame: int = 0
    game_over: bool = False
    rules: ModeRules = field(init=False)

    def __post_init__(self) -> None:
        self.rules = rules_for(self.mode)

    # -- Queries --

    def is_paused(self, now_ms: float) -> bool:
        return now_ms < self.paused_until_ms

    @property
    def freeze_active(self) -> bool:
        return self.freeze_left > 0

    def combo_progress(self, step: int) -> int:
        """Hits counted toward the next multiplier step (0 .. step-1)."""
        return self.combo % step

    # -- Mutators --

    def add_points(self, points: float) -> None:
        if self.game_over:
            return
        self.score += points

    def penalize(self, points: float) -> None:
        """Subtract points, never going below zero."""
        if self.game_over:
            return
        self.score = max(0, self.score - points)

    def set_score(self, value: float) -> None:
        if self.game_over:
            return
        self.score = value

    def record_hit(self, points: float, step: int) -> bool:
        """Count one combo hit and score it at the current multiplier.

        The multiplier steps up after every ``step``-th consecutive hit, so the
        hit that completes a step is still scored at the old multiplier.
        Returns True when the multiplier went up.
        """
        if self.game_over:
            return False
        self.combo += 1
        self.score += points * self.multiplier
        if self.combo % step == 0:
            self.multiplier += 1
            return True
        return False

    def reset_combo(self) -> None:
        if self.game_over:
            return
        self.combo = 0
        self.multiplier = 1

    def lose_life(self) -> int:
        """Remove one life and return the remainder (clamped at zero)."""
        if self.game_over:
            return self.lives
        self.lives = max(0, self.lives - 1)
        return self.lives

    def tick_second(self) -> int:
        if self.game_over:
            return self.time_left
        self.time_left = max(0, self.time_left - 1)
        return self.time_left

    def pause(self, until_ms: float) -> None:
        if self.game_over:
            return
        self.paused_until_ms = max(self.paused_until_ms, until_ms)

    def start_freeze(self, frames: int) -> None:
        if self.game_over:
            return
        self.freeze_left = frames

    def latch_game_over(self) -> bool:
        """Set the terminal latch. Returns True only for the first call."""
        if self.game_over:
            return False
        self.game_over = True
        return True
