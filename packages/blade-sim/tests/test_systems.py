"""Tests for spawn cadence, half fade-out and particles."""
from __future__ import annotations

import pytest

from blade import Category, Engine, GameConfig, Half, Item, Mode, Particle, SessionState, World
from blade_sim import (
    Spawner,
    make_fade_system,
    make_particle_system,
    make_spawn_system,
    opacity,
    spawn_interval,
)


def _engine(config: GameConfig) -> Engine:
    return Engine(fps=config.fps, seed=5, world=World(config.width, config.height))


def _half(sliced_at: float) -> Item:
    return Item(
        category=Category.FRUIT,
        position=(100.0, 100.0),
        velocity=(0.0, 0.0),
        halved=Half.LEFT,
        sliced_at=sliced_at,
    )


# ── Spawning ───────────────────────────────────────────────────


class TestSpawnInterval:
    def test_base(self) -> None:
        state = SessionState(mode=Mode.TIMED)
        assert spawn_interval(state, GameConfig()) == 35.0

    def test_shrinks_with_difficulty_and_freeze(self) -> None:
        state = SessionState(mode=Mode.TIMED, difficulty=1.25)
        assert spawn_interval(state, GameConfig()) == 28.0
        state.start_freeze(10)
        assert spawn_interval(state, GameConfig()) == 14.0


class TestSpawnSystem:
    def _setup(self, **state_kw):
        config = GameConfig(spawn_interval=10.0)
        state = SessionState(mode=Mode.TIMED, **state_kw)
        engine = _engine(config)
        engine.add_system(make_spawn_system(Spawner(config), state, config))
        return config, state, engine

    def test_spawns_once_interval_exceeded(self) -> None:
        _, state, engine = self._setup()
        state.play_frames = 10
        engine.step()
        assert engine.world.count() == 0
        state.play_frames = 11
        engine.step()
        assert engine.world.count() == 1
        assert state.last_spawn_frame == 11
        engine.step()
        assert engine.world.count() == 1

    def test_no_spawn_while_paused(self) -> None:
        _, state, engine = self._setup()
        state.play_frames = 100
        state.pause(10_000.0)
        engine.step()
        assert engine.world.count() == 0

    def test_no_spawn_after_game_over(self) -> None:
        _, state, engine = self._setup()
        state.play_frames = 100
        state.latch_game_over()
        engine.step()
        assert engine.world.count() == 0


# ── Fade ───────────────────────────────────────────────────────


class TestFade:
    def test_opacity_whole_item(self) -> None:
        item = Item(category=Category.FRUIT, position=(0.0, 0.0), velocity=(0.0, 0.0))
        assert opacity(item, 99_999.0, 1500.0) == 1.0

    def test_opacity_strictly_decreasing(self) -> None:
        half = _half(1000.0)
        values = [opacity(half, 1000.0 + t, 1500.0) for t in (0, 300, 750, 1200, 1499)]
        assert values[0] == 1.0
        assert values == sorted(values, reverse=True)
        assert len(set(values)) == len(values)
        assert opacity(half, 1750.0, 1500.0) == pytest.approx(0.5)
        assert opacity(half, 4000.0, 1500.0) == 0.0

    def test_removed_when_faded(self) -> None:
        config = GameConfig(fps=10, fade_ms=300.0)
        engine = _engine(config)
        eid = engine.world.spawn(_half(0.0))
        engine.add_system(make_fade_system(config))
        engine.step()
        engine.step()
        assert engine.world.alive(eid)
        engine.step()
        assert not engine.world.alive(eid)

    def test_whole_items_untouched(self) -> None:
        config = GameConfig(fps=10, fade_ms=100.0)
        engine = _engine(config)
        eid = engine.world.spawn(
            Item(category=Category.FRUIT, position=(0.0, 0.0), velocity=(0.0, 0.0))
        )
        engine.add_system(make_fade_system(config))
        engine.run(20)
        assert engine.world.alive(eid)


# ── Particles ──────────────────────────────────────────────────


class TestParticles:
    def test_move_and_decay(self) -> None:
        config = GameConfig(particle_decay=0.25)
        engine = _engine(config)
        engine.world.emit(Particle(position=(0.0, 0.0), velocity=(2.0, -1.0), color=(1, 2, 3), size=5.0))
        engine.add_system(make_particle_system(config))
        engine.step()
        (p,) = engine.world.particles
        assert p.position == (2.0, -1.0)
        assert p.life == 0.75

    def test_removed_at_zero_life(self) -> None:
        config = GameConfig(particle_decay=0.25)
        engine = _engine(config)
        engine.world.emit(Particle(position=(0.0, 0.0), velocity=(0.0, 0.0), color=(1, 2, 3), size=5.0))
        engine.add_system(make_particle_system(config))
        engine.run(3)
        assert len(engine.world.particles) == 1
        engine.step()
        assert engine.world.particles == []
