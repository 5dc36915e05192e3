"""System factories for slicing and the protected target."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from blade_physics import point_in_circle
from blade_score.path import blade_path, path_hits

if TYPE_CHECKING:
    from blade import FrameContext, World
    from blade_gesture import Trail
    from blade_score.scorer import Scorer


def make_slice_system(scorer: Scorer, trail: Trail) -> Callable[[World, FrameContext], None]:
    """Test every whole item against the blade path after motion has run.

    Slicing stays live during a bomb pause; only a finished round stops it.
    """
    config = scorer.config

    def slice_system(world: World, ctx: FrameContext) -> None:
        if scorer.state.game_over:
            return
        path = blade_path(trail, config.blade_mode)
        if path is None:
            return
        for item in world.items(halved=False):
            if path_hits(path, item.position, config.hit_radius):
                scorer.resolve(world, ctx, item)
                if scorer.state.game_over:
                    return

    return slice_system


def make_guard_system(
    scorer: Scorer, center: tuple[float, float]
) -> Callable[[World, FrameContext], None]:
    """Whole items that drift within ``guard_radius`` of ``center`` cost a life."""
    radius = scorer.config.guard_radius

    def guard_system(world: World, ctx: FrameContext) -> None:
        for item in world.items(halved=False):
            if scorer.state.game_over:
                return
            if point_in_circle(item.position, center, radius):
                scorer.target_hit(world, ctx, item)

    return guard_system
