"""SessionController - wires one round together and owns its phase."""
from __future__ import annotations

import logging
import time
from typing import Callable

from blade import (
    Engine,
    FrameContext,
    GameConfig,
    RoundSettings,
    SessionState,
    SignalBus,
    World,
    make_signal_system,
    signals,
)
from blade.types import System
from blade_gesture import GestureReader, HandLandmarks, LatestValue, Pointer, Trail, make_gesture_system
from blade_physics import make_bounds_system, make_motion_system, make_wall_system
from blade_score import Scorer, make_guard_system, make_slice_system
from blade_select import CalibrationGauge, SelectionMachine, Target
from blade_session.components import Notice, Phase, RoundResult
from blade_session.notices import NoticeBoard, make_notice_system
from blade_session.systems import level_progress, make_play_clock_system
from blade_sim import Spawner, make_fade_system, make_particle_system, make_spawn_system

logger = logging.getLogger(__name__)

EXIT_TARGET = "exit"


class SessionController:
    """CALIBRATING → PLAYING → ENDED, or EXITED from either live phase.

    Builds the engine with its systems in frame order: perception,
    calibration, exit gesture, play clock, spawning, motion, walls, fade,
    bounds, slicing, target guard, particles, notices, signal delivery.
    Gameplay systems only run while PLAYING.

    ``snapshot`` is called once at round end for the result photo and
    ``on_round_end`` receives the finished ``RoundResult``. ``on_exit``
    fires when the player leaves through the exit gesture; no result is
    produced in that case.
    """

    def __init__(
        self,
        settings: RoundSettings,
        config: GameConfig | None = None,
        *,
        cell: LatestValue[HandLandmarks] | None = None,
        snapshot: Callable[[], bytes | None] | None = None,
        on_round_end: Callable[[RoundResult], None] | None = None,
        on_exit: Callable[[], None] | None = None,
        seed: int | None = None,
        wall_clock: Callable[[], float] = time.time,
    ) -> None:
        self.settings = settings
        self.config = config = config if config is not None else GameConfig()
        self.cell: LatestValue[HandLandmarks] = cell if cell is not None else LatestValue()
        self._snapshot = snapshot
        self._on_round_end = on_round_end
        self._on_exit = on_exit
        self._wall_clock = wall_clock

        self.phase = Phase.CALIBRATING
        self.result: RoundResult | None = None
        self.started_at_ms: float | None = None

        self.state = SessionState(mode=settings.mode)
        rules = self.state.rules
        if rules.life_limited:
            self.state.lives = config.lives
        if rules.time_limited:
            self.state.time_left = settings.duration

        self.world = World(config.width, config.height)
        self.engine = Engine(fps=config.fps, seed=seed, world=self.world)
        self.bus = SignalBus()
        self.trail = Trail(config.trail_length, config.trail_max_age_ms)
        self.reader = GestureReader(
            config.width, config.height, self.trail, stale_frames=config.stale_frames
        )
        self.gauge = CalibrationGauge(
            self.world.center,
            config.calibration_radius,
            fill=config.calibration_fill,
            decay=config.calibration_decay,
            units=config.calibration_units,
        )
        self.exit_machine = SelectionMachine(
            config.exit_hold_ms, [Target(EXIT_TARGET, config.exit_rect())]
        )
        self.notices = NoticeBoard(config)
        self.notices.attach(self.bus)

        self.target = self.world.center if rules.protect_target else None
        self.spawner = Spawner(config, aim_at=self.target)
        self.scorer = Scorer(self.state, config, self.bus, self.spawner, end_round=self.end_round)

        self._build_systems()

    # -- Wiring --

    def _build_systems(self) -> None:
        config = self.config
        engine = self.engine
        engine.add_system(make_gesture_system(self.cell, self.reader))
        engine.add_system(self._calibration_system)
        engine.add_system(self._exit_system)

        playing: list[System] = [
            make_play_clock_system(self.state, config, self.bus, self.end_round),
            make_spawn_system(self.spawner, self.state, config),
            make_motion_system(self.state, config),
        ]
        if config.wall_bounce:
            playing.append(make_wall_system(self.state, config))
        playing += [
            make_fade_system(config),
            make_bounds_system(config, on_exit=self.scorer.miss),
            make_slice_system(self.scorer, self.trail),
        ]
        if self.target is not None:
            playing.append(make_guard_system(self.scorer, self.target))
        playing.append(make_particle_system(config))
        for system in playing:
            engine.add_system(self._while_playing(system))

        engine.add_system(make_notice_system(self.notices))
        engine.add_system(make_signal_system(self.bus))

    def _while_playing(self, system: System) -> System:
        def gated(world: World, ctx: FrameContext) -> None:
            if self.phase is Phase.PLAYING:
                system(world, ctx)

        return gated

    def _calibration_system(self, world: World, ctx: FrameContext) -> None:
        if self.phase is not Phase.CALIBRATING:
            return
        self.gauge.update(self.reader.position)
        if self.gauge.complete:
            self.phase = Phase.PLAYING
            self.started_at_ms = ctx.now_ms
            logger.info("round started: mode=%s", self.settings.mode.value)
            self.bus.publish(signals.ROUND_START, mode=self.settings.mode)

    def _exit_system(self, world: World, ctx: FrameContext) -> None:
        if self.phase not in (Phase.CALIBRATING, Phase.PLAYING):
            return
        if self.exit_machine.update(self.reader.pointer, ctx.now_ms) == EXIT_TARGET:
            self.exit()

    # -- Driving --

    def step(self) -> None:
        self.engine.step()

    def run(self, frames: int) -> None:
        self.engine.run(frames)

    def end_round(self, reason: str = "") -> RoundResult | None:
        """Latch the round as over and hand off the result. Idempotent."""
        if not self.state.latch_game_over():
            return None
        self.phase = Phase.ENDED
        photo = self._snapshot() if self._snapshot is not None else None
        self.result = RoundResult(
            score=self.state.score,
            mode=self.settings.mode,
            photo=photo,
            timestamp=self._wall_clock(),
            reason=reason,
        )
        logger.info(
            "round ended (%s): mode=%s score=%s", reason or "stopped",
            self.settings.mode.value, self.state.score,
        )
        self.bus.publish(signals.ROUND_END, score=self.state.score, reason=reason)
        if self._on_round_end is not None:
            self._on_round_end(self.result)
        return self.result

    def exit(self) -> None:
        """Leave without recording a result."""
        if self.phase in (Phase.ENDED, Phase.EXITED):
            return
        self.state.latch_game_over()
        self.phase = Phase.EXITED
        logger.info("round exited: mode=%s", self.settings.mode.value)
        self.bus.publish(signals.EXIT)
        if self._on_exit is not None:
            self._on_exit()

    # -- HUD queries --

    @property
    def pointer(self) -> Pointer | None:
        return self.reader.pointer

    @property
    def notice(self) -> Notice | None:
        return self.notices.current

    @property
    def calibration_progress(self) -> float:
        return self.gauge.progress

    @property
    def exit_progress(self) -> float:
        return self.exit_machine.progress

    @property
    def level_progress(self) -> float:
        return level_progress(self.state, self.config)

    @property
    def combo_progress(self) -> int:
        return self.state.combo_progress(self.config.combo_step)

    @property
    def done(self) -> bool:
        return self.phase in (Phase.ENDED, Phase.EXITED)
