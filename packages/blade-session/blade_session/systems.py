"""Play clock: difficulty cycle, countdown, survival timer and freeze."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from blade import signals

if TYPE_CHECKING:
    from blade import FrameContext, GameConfig, SessionState, SignalBus, World

logger = logging.getLogger(__name__)


def make_play_clock_system(
    state: SessionState,
    config: GameConfig,
    bus: SignalBus,
    end_round: Callable[[str], object],
) -> Callable[[World, FrameContext], None]:
    """Count play frames and drive everything keyed off them.

    The clock stands still while a bomb pause is running, so the countdown,
    the difficulty cycle and the freeze window all resume where they left
    off.
    """
    rules = state.rules

    def play_clock_system(world: World, ctx: FrameContext) -> None:
        if state.game_over or state.is_paused(ctx.now_ms):
            return
        state.play_frames += 1
        frames = state.play_frames

        if frames % config.difficulty_period == 0:
            state.difficulty *= config.difficulty_growth
            logger.debug("difficulty raised to %.3f at frame %d", state.difficulty, frames)
            bus.publish(signals.SPEED_UP, difficulty=state.difficulty)

        if state.freeze_left > 0:
            state.freeze_left -= 1

        if rules.score_seconds:
            state.set_score(round(frames / config.fps, 2))

        if rules.time_limited and frames % config.fps == 0:
            if state.tick_second() == 0:
                end_round("time")

    return play_clock_system


def level_progress(state: SessionState, config: GameConfig) -> float:
    """Fraction of the current difficulty period already played."""
    return (state.play_frames % config.difficulty_period) / config.difficulty_period
