"""System factories for per-frame motion and boundary handling."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from blade import FrameContext, GameConfig, Item, SessionState, World


def speed_modifier(state: SessionState, config: GameConfig) -> float:
    return config.freeze_speed if state.freeze_active else 1.0


def make_motion_system(
    state: SessionState, config: GameConfig
) -> Callable[[World, FrameContext], None]:
    """Explicit Euler step in per-frame units: gravity → velocity → position.

    Halves fall slower and spin faster. Nothing moves while the session is
    paused or over; an active freeze scales every term by ``freeze_speed``.
    """

    def motion_system(world: World, ctx: FrameContext) -> None:
        if state.game_over or state.is_paused(ctx.now_ms):
            return
        speed = speed_modifier(state, config)
        for item in world.items():
            g = config.gravity * (config.half_gravity if item.is_half else 1.0)
            vx, vy = item.velocity
            vy += g * speed
            item.velocity = (vx, vy)
            x, y = item.position
            item.position = (x + vx * speed, y + vy * speed)
            spin = config.half_spin if item.is_half else 1.0
            item.rotation += item.rotation_speed * spin * speed

    return motion_system


def make_wall_system(
    state: SessionState, config: GameConfig
) -> Callable[[World, FrameContext], None]:
    """Rebound off the left/right walls, inverting and damping vx."""
    left = config.wall_margin
    right = config.width - config.wall_margin

    def wall_system(world: World, ctx: FrameContext) -> None:
        if state.game_over or state.is_paused(ctx.now_ms):
            return
        for item in world.items():
            x, y = item.position
            if left <= x <= right:
                continue
            vx, vy = item.velocity
            item.velocity = (-vx * config.wall_damping, vy)
            item.position = (left + 1 if x < left else right - 1, y)

    return wall_system


def make_bounds_system(
    config: GameConfig,
    on_exit: Callable[[World, FrameContext, Item, str], None] | None = None,
) -> Callable[[World, FrameContext], None]:
    """Despawn items that left the playfield by more than ``exit_margin``.

    ``on_exit`` receives the item after removal together with the edge it
    crossed (``"bottom"``, ``"left"`` or ``"right"``). Items above the top
    edge are kept: they are still on their way up or coming back down.
    """
    margin = config.exit_margin

    def bounds_system(world: World, ctx: FrameContext) -> None:
        for item in world.items():
            x, y = item.position
            if y > config.height + margin:
                edge = "bottom"
            elif x < -margin:
                edge = "left"
            elif x > config.width + margin:
                edge = "right"
            else:
                continue
            world.despawn(item.id)
            if on_exit is not None:
                on_exit(world, ctx, item, edge)

    return bounds_system
