"""Tuning configuration and per-round settings."""
from __future__ import annotations

import dataclasses
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from blade.modes import Mode
from blade.types import ConfigError

logger = logging.getLogger(__name__)

DURATION_CHOICES = (60, 120, 180)

BLADE_SEGMENT = "segment"
BLADE_POINT = "point"


@dataclass(frozen=True)
class GameConfig:
    """Immutable tuning constants for one engine instance.

    Distances are pixels of the render surface, velocities pixels per frame,
    durations either frames (``*_frames``) or milliseconds (``*_ms``).

    Attributes:
        width: Playfield width.
        height: Playfield height.
        fps: Simulation frames per second.
        gravity: Downward acceleration added to vy every frame.
        half_gravity: Gravity factor applied to halves.
        half_spin: Rotation factor applied to halves.
        spawn_interval: Frames between spawns at difficulty 1.
        bomb_chance: Upper bound of the bomb draw.
        ice_chance: Upper bound of the ice draw (cumulative).
        basket_chance: Upper bound of the basket draw (cumulative).
        launch_angle: Launch angle range in degrees.
        apex_overshoot: Extra apex height above the playfield height.
        launch_spread: Horizontal velocity factor.
        spawn_inset: Distance kept from the side edges when spawning.
        spawn_depth: Distance below the bottom edge where items start.
        rotation_speed: Range of spin per frame in radians.
        item_scale: Visual scale of spawned items.
        wall_bounce: Rebound off the left/right walls instead of flying out.
        wall_margin: Wall distance from each side.
        wall_damping: Horizontal speed kept after a rebound.
        exit_margin: Distance outside the playfield at which items are dropped.
        fade_ms: Lifetime of a half after the slice.
        slice_spread: (dvx, dvy) magnitudes given to halves.
        hit_radius: Blade reach around an item centre.
        blade_mode: ``"segment"`` or ``"point"`` slice detection.
        trail_length: Maximum samples kept in the blade trail.
        trail_max_age_ms: Maximum sample age in the trail, ``None`` for no limit.
        combo_step: Consecutive fruit hits per multiplier step.
        bomb_penalty: Points removed by a bomb.
        bomb_pause_ms: Freeze of physics and spawning after a bomb.
        freeze_frames: Length of the ice slow motion.
        freeze_speed: Speed modifier while ice is active.
        freeze_spawn_divisor: Spawn interval divisor while ice is active.
        bonus_spawn_count: Extra items launched by a basket.
        particle_count: Particles per hit.
        particle_speed: Maximum particle speed per axis.
        particle_decay: Life lost per frame.
        particle_size: Particle radius range.
        difficulty_period: Play frames between difficulty increases.
        difficulty_growth: Factor applied to the difficulty multiplier.
        lives: Starting lives in life-limited modes.
        calibration_radius: Radius of the central calibration target.
        calibration_fill: Units gained per frame inside the target.
        calibration_decay: Units lost per frame outside the target.
        calibration_units: Units representing 100%.
        hold_ms: Hold-to-confirm duration for menu targets.
        exit_hold_ms: Hold duration of the in-round exit region.
        exit_region: (x, y, w, h) of the exit region, negative x from the right.
        guard_radius: Reach of the protected target in dodge mode.
        aim_jitter: Relative randomisation of the dodge aim.
        notice_frames: Lifetime of an on-screen notice.
        start_notice_frames: Lifetime of the start notice.
        stale_frames: Frames without a perception result before the hand is absent.
        strict: Raise on programmer errors instead of skipping the entity.
    """

    width: int = 1280
    height: int = 720
    fps: int = 60
    gravity: float = 0.28
    half_gravity: float = 0.8
    half_spin: float = 1.5
    spawn_interval: float = 35.0
    bomb_chance: float = 0.08
    ice_chance: float = 0.12
    basket_chance: float = 0.15
    launch_angle: tuple[float, float] = (45.0, 80.0)
    apex_overshoot: tuple[float, float] = (50.0, 150.0)
    launch_spread: float = 0.6
    spawn_inset: float = 100.0
    spawn_depth: float = 100.0
    rotation_speed: tuple[float, float] = (-0.1, 0.1)
    item_scale: float = 2.2
    wall_bounce: bool = True
    wall_margin: float = 50.0
    wall_damping: float = 0.5
    exit_margin: float = 300.0
    fade_ms: float = 1500.0
    slice_spread: tuple[float, float] = (3.0, 1.0)
    hit_radius: float = 80.0
    blade_mode: str = BLADE_SEGMENT
    trail_length: int = 12
    trail_max_age_ms: float | None = 250.0
    combo_step: int = 10
    bomb_penalty: int = 5
    bomb_pause_ms: float = 800.0
    freeze_frames: int = 300
    freeze_speed: float = 0.6
    freeze_spawn_divisor: float = 2.0
    bonus_spawn_count: int = 12
    particle_count: int = 15
    particle_speed: float = 8.0
    particle_decay: float = 0.04
    particle_size: tuple[float, float] = (5.0, 10.0)
    difficulty_period: int = 600
    difficulty_growth: float = 1.2
    lives: int = 10
    calibration_radius: float = 80.0
    calibration_fill: float = 1.5
    calibration_decay: float = 1.0
    calibration_units: float = 45.0
    hold_ms: float = 3000.0
    exit_hold_ms: float = 1500.0
    exit_region: tuple[float, float, float, float] = (-250.0, 20.0, 220.0, 80.0)
    guard_radius: float = 70.0
    aim_jitter: float = 0.15
    notice_frames: int = 150
    start_notice_frames: int = 240
    stale_frames: int = 15
    strict: bool = False

    def __post_init__(self) -> None:
        positive = (
            "width", "height", "fps", "gravity", "spawn_interval", "fade_ms",
            "hit_radius", "trail_length", "combo_step", "freeze_spawn_divisor",
            "particle_decay", "difficulty_period", "difficulty_growth",
            "calibration_fill", "calibration_units", "hold_ms", "exit_hold_ms",
            "guard_radius", "stale_frames",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)!r}")
        if not 0.0 <= self.bomb_chance <= self.ice_chance <= self.basket_chance <= 1.0:
            raise ConfigError(
                "category thresholds must satisfy 0 <= bomb <= ice <= basket <= 1"
            )
        if self.blade_mode not in (BLADE_SEGMENT, BLADE_POINT):
            raise ConfigError(f"unknown blade_mode {self.blade_mode!r}")
        if not 0.0 < self.freeze_speed <= 1.0:
            raise ConfigError("freeze_speed must be in (0, 1]")
        if self.lives < 1:
            raise ConfigError("lives must be at least 1")
        if self.trail_max_age_ms is not None and self.trail_max_age_ms <= 0:
            raise ConfigError("trail_max_age_ms must be positive or None")
        for name in ("launch_angle", "apex_overshoot", "rotation_speed", "particle_size"):
            lo, hi = getattr(self, name)
            if lo > hi:
                raise ConfigError(f"{name} range is inverted: {lo} > {hi}")

    @property
    def frame_ms(self) -> float:
        return 1000 / self.fps

    def exit_rect(self) -> tuple[float, float, float, float]:
        """Exit region resolved against the playfield width."""
        x, y, w, h = self.exit_region
        if x < 0:
            x = self.width + x
        return (x, y, w, h)


@dataclass(frozen=True)
class RoundSettings:
    """Choices made on the menu before a round starts."""

    mode: Mode = Mode.TIMED
    duration: int = 60

    def __post_init__(self) -> None:
        if not isinstance(self.mode, Mode):
            raise ConfigError(f"unknown mode {self.mode!r}")
        if self.mode is Mode.TIMED and self.duration <= 0:
            raise ConfigError(f"duration must be positive, got {self.duration}")


def parse_mode(value: str) -> Mode:
    try:
        return Mode(value.lower())
    except ValueError:
        names = ", ".join(m.value for m in Mode)
        raise ConfigError(f"unknown mode {value!r} (expected one of: {names})") from None


def config_from_dict(data: dict[str, Any], base: GameConfig | None = None) -> GameConfig:
    """Apply overrides to ``base`` (or the defaults). Lists become tuples."""
    base = base if base is not None else GameConfig()
    known = {f.name for f in dataclasses.fields(GameConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
    values = {k: tuple(v) if isinstance(v, list) else v for k, v in data.items()}
    return dataclasses.replace(base, **values)


def load_config(path: str | Path) -> GameConfig:
    """Load a TOML file of ``GameConfig`` overrides.

    Keys may sit at the top level or under a ``[game]`` table.
    """
    path = Path(path)
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    table = data.get("game", data)
    config = config_from_dict(table)
    logger.info("loaded config overrides from %s (%d keys)", path, len(table))
    return config
