"""System factories for spawning, half fade-out and particles."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from blade import FrameContext, GameConfig, Item, SessionState, World
    from blade_sim.spawner import Spawner


def spawn_interval(state: SessionState, config: GameConfig) -> float:
    """Frames between launches: shrinks with difficulty, divided again while frozen."""
    interval = config.spawn_interval / state.difficulty
    if state.freeze_active:
        interval /= config.freeze_spawn_divisor
    return interval


def make_spawn_system(
    spawner: Spawner, state: SessionState, config: GameConfig
) -> Callable[[World, FrameContext], None]:
    def spawn_system(world: World, ctx: FrameContext) -> None:
        if state.game_over or state.is_paused(ctx.now_ms):
            return
        if state.play_frames - state.last_spawn_frame > spawn_interval(state, config):
            spawner.launch(world, ctx.random)
            state.last_spawn_frame = state.play_frames

    return spawn_system


def opacity(item: Item, now_ms: float, fade_ms: float) -> float:
    """1.0 for whole items; halves fade linearly from their slice time."""
    if item.sliced_at is None:
        return 1.0
    age = now_ms - item.sliced_at
    return max(0.0, 1.0 - age / fade_ms)


def make_fade_system(config: GameConfig) -> Callable[[World, FrameContext], None]:
    def fade_system(world: World, ctx: FrameContext) -> None:
        for item in world.items(halved=True):
            if opacity(item, ctx.now_ms, config.fade_ms) <= 0.0:
                world.despawn(item.id)

    return fade_system


def make_particle_system(config: GameConfig) -> Callable[[World, FrameContext], None]:
    """Move particles and burn down their life; they keep going while paused."""

    def particle_system(world: World, ctx: FrameContext) -> None:
        alive = []
        for p in world.particles:
            x, y = p.position
            vx, vy = p.velocity
            p.position = (x + vx, y + vy)
            p.life -= config.particle_decay
            if p.life > 0:
                alive.append(p)
        world.particles[:] = alive

    return particle_system
