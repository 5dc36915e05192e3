"""Tests for SessionController: calibration, round end, exit and the play clock."""
from __future__ import annotations

import pytest

from blade import Category, GameConfig, Item, Mode, RoundSettings
from blade_gesture import FINGER_PAIRS, LANDMARK_COUNT, HandLandmarks
from blade_session import Phase, RoundResult, SessionController

QUIET = GameConfig(spawn_interval=1e9)


def _hand(px: float, py: float, grab: bool = False, config: GameConfig = QUIET) -> HandLandmarks:
    """A hand whose index tip maps to surface pixel (px, py)."""
    nx, ny = 1.0 - px / config.width, py / config.height
    knuckle = ny - 0.05 if grab else ny + 0.05
    points = [(nx, knuckle)] * LANDMARK_COUNT
    for tip, _mcp in FINGER_PAIRS:
        points[tip] = (nx, ny)
    return HandLandmarks.from_xy(points)


class Harness:
    def __init__(self, mode: Mode = Mode.TIMED, duration: int = 60, config: GameConfig = QUIET):
        self.results: list[RoundResult] = []
        self.exits = 0
        self.snapshots = 0
        self.ctrl = SessionController(
            RoundSettings(mode=mode, duration=duration),
            config,
            snapshot=self._snapshot,
            on_round_end=self.results.append,
            on_exit=self._exit,
            seed=42,
            wall_clock=lambda: 1_700_000_000.0,
        )

    def _snapshot(self) -> bytes:
        self.snapshots += 1
        return b"jpeg"

    def _exit(self) -> None:
        self.exits += 1

    def calibrate(self) -> None:
        cx, cy = self.ctrl.world.center
        for _ in range(30):
            self.ctrl.cell.put(_hand(cx, cy))
            self.ctrl.step()
        assert self.ctrl.phase is Phase.PLAYING
        self.ctrl.cell.put(None)

    def drop_fruit(self) -> Item:
        config = self.ctrl.config
        item = Item(
            category=Category.FRUIT,
            position=(640.0, config.height + config.exit_margin + 10),
            velocity=(0.0, 1.0),
        )
        self.ctrl.world.spawn(item)
        return item


# ── Calibration ────────────────────────────────────────────────


class TestCalibration:
    def test_gameplay_inert_while_calibrating(self) -> None:
        h = Harness(config=GameConfig(spawn_interval=1.0))
        h.ctrl.run(200)
        assert h.ctrl.phase is Phase.CALIBRATING
        assert h.ctrl.state.play_frames == 0
        assert h.ctrl.world.count() == 0

    def test_hand_at_center_starts_round(self) -> None:
        h = Harness()
        cx, cy = h.ctrl.world.center
        for _ in range(29):
            h.ctrl.cell.put(_hand(cx, cy))
            h.ctrl.step()
        assert h.ctrl.phase is Phase.CALIBRATING
        assert h.ctrl.calibration_progress == pytest.approx(29 * 1.5 / 45 * 100)
        h.ctrl.cell.put(_hand(cx, cy))
        h.ctrl.step()
        assert h.ctrl.phase is Phase.PLAYING
        assert h.ctrl.started_at_ms == h.ctrl.engine.clock.now_ms
        assert h.ctrl.notice is not None
        assert h.ctrl.notice.text == "START!"

    def test_lives_and_time_follow_mode(self) -> None:
        assert Harness(Mode.TIMED, duration=120).ctrl.state.time_left == 120
        assert Harness(Mode.TIMED).ctrl.state.lives == 0
        assert Harness(Mode.SURVIVAL).ctrl.state.lives == 10
        assert Harness(Mode.DODGE).ctrl.target == (640.0, 360.0)
        assert Harness(Mode.SURVIVAL).ctrl.target is None


# ── Round end ──────────────────────────────────────────────────


class TestTimedRound:
    def test_sixty_ticks_end_exactly_once(self) -> None:
        h = Harness(Mode.TIMED, duration=60)
        h.calibrate()
        while h.ctrl.state.play_frames < 3599:
            h.ctrl.step()
        assert h.ctrl.state.time_left == 1
        assert h.ctrl.phase is Phase.PLAYING
        h.ctrl.step()
        assert h.ctrl.state.time_left == 0
        assert h.ctrl.phase is Phase.ENDED
        h.ctrl.run(300)
        assert h.ctrl.state.time_left == 0
        assert h.ctrl.state.play_frames == 3600
        assert len(h.results) == 1
        assert h.snapshots == 1
        result = h.results[0]
        assert result.mode is Mode.TIMED
        assert result.photo == b"jpeg"
        assert result.timestamp == 1_700_000_000.0
        assert result.reason == "time"


class TestSurvivalRound:
    def test_tenth_miss_ends_round(self) -> None:
        h = Harness(Mode.SURVIVAL)
        h.calibrate()
        for i in range(9):
            h.drop_fruit()
            h.ctrl.step()
            assert h.ctrl.state.lives == 9 - i
            assert h.ctrl.phase is Phase.PLAYING
        h.drop_fruit()
        h.ctrl.step()
        assert h.ctrl.state.lives == 0
        assert h.ctrl.phase is Phase.ENDED
        assert len(h.results) == 1
        assert h.results[0].reason == "lives"

    def test_state_frozen_after_latch(self) -> None:
        h = Harness(Mode.SURVIVAL)
        h.calibrate()
        h.ctrl.state.score = 12
        h.ctrl.end_round("test")
        fruit = h.drop_fruit()
        floating = Item(category=Category.FRUIT, position=(100.0, 100.0), velocity=(3.0, 3.0))
        h.ctrl.world.spawn(floating)
        frames = h.ctrl.state.play_frames
        h.ctrl.run(120)
        assert h.ctrl.state.score == 12
        assert h.ctrl.state.lives == 10
        assert h.ctrl.state.play_frames == frames
        assert h.ctrl.world.alive(fruit.id)
        assert floating.position == (100.0, 100.0)

    def test_end_round_is_idempotent(self) -> None:
        h = Harness()
        h.calibrate()
        first = h.ctrl.end_round("time")
        assert first is not None
        assert h.ctrl.end_round("time") is None
        assert h.results == [first]
        assert h.snapshots == 1


class TestDodgeRound:
    def test_score_is_survival_seconds(self) -> None:
        h = Harness(Mode.DODGE)
        h.calibrate()
        h.ctrl.run(89)
        assert h.ctrl.state.play_frames == 90
        assert h.ctrl.state.score == 1.5


# ── Play clock ─────────────────────────────────────────────────


class TestPlayClock:
    def test_difficulty_cycle(self) -> None:
        h = Harness(config=GameConfig(spawn_interval=1e9, difficulty_period=30))
        h.calibrate()
        h.ctrl.run(28)
        assert h.ctrl.state.difficulty == 1.0
        assert h.ctrl.level_progress == pytest.approx(29 / 30)
        h.ctrl.step()
        assert h.ctrl.state.difficulty == pytest.approx(1.2)
        assert h.ctrl.level_progress == 0.0
        assert h.ctrl.notice.text == "SPEED UP!"

    def test_bomb_pause_holds_the_clock(self) -> None:
        h = Harness()
        h.calibrate()
        frames = h.ctrl.state.play_frames
        h.ctrl.state.pause(h.ctrl.engine.clock.now_ms + 500)
        h.ctrl.run(20)
        assert h.ctrl.state.play_frames == frames
        h.ctrl.run(20)
        assert h.ctrl.state.play_frames > frames

    def test_freeze_counts_down(self) -> None:
        h = Harness()
        h.calibrate()
        h.ctrl.state.start_freeze(10)
        h.ctrl.run(4)
        assert h.ctrl.state.freeze_left == 6


# ── Exit gesture ───────────────────────────────────────────────


class TestExit:
    def _hold_exit(self, h: Harness, frames: int) -> None:
        x, y, w, hh = h.ctrl.config.exit_rect()
        for _ in range(frames):
            h.ctrl.cell.put(_hand(x + w / 2, y + hh / 2, grab=True))
            h.ctrl.step()

    def test_grab_hold_on_exit_region_leaves(self) -> None:
        h = Harness(Mode.SURVIVAL)
        h.calibrate()
        self._hold_exit(h, 95)
        assert h.ctrl.phase is Phase.EXITED
        assert h.exits == 1
        assert h.results == []
        assert h.ctrl.result is None
        assert h.ctrl.done

    def test_exit_available_while_calibrating(self) -> None:
        h = Harness()
        self._hold_exit(h, 95)
        assert h.ctrl.phase is Phase.EXITED

    def test_short_hold_does_not_exit(self) -> None:
        h = Harness()
        h.calibrate()
        self._hold_exit(h, 60)
        assert h.ctrl.phase is Phase.PLAYING
        assert 0.0 < h.ctrl.exit_progress < 100.0
