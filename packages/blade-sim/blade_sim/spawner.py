"""Spawner - places new items on a ballistic arc from the bottom edge."""
from __future__ import annotations

import math
import random

from blade import Category, EntityId, GameConfig, Item, World
from blade_physics import random_range
from blade_sim.catalog import draw_category, spec_for


class Spawner:
    """Launches items from the left or right third of the playfield.

    The launch speed comes from the apex it should reach,
    ``v0 = sqrt(2 * g * (height + overshoot))``, so every arc peaks near or
    just above the top edge. With ``aim_at`` set, the horizontal speed is
    solved instead so the item crosses the target's height close to it.
    """

    def __init__(
        self,
        config: GameConfig,
        aim_at: tuple[float, float] | None = None,
    ) -> None:
        self.config = config
        self.aim_at = aim_at

    def launch(
        self,
        world: World,
        rng: random.Random,
        category: Category | None = None,
    ) -> EntityId:
        config = self.config
        if category is None:
            category = draw_category(rng, config)
        spec = spec_for(category, rng)

        from_left = rng.random() < 0.5
        third = world.width / 3
        if from_left:
            x = random_range(rng, config.spawn_inset, third)
        else:
            x = random_range(rng, 2 * third, world.width - config.spawn_inset)
        y = world.height + config.spawn_depth

        angle = math.radians(random_range(rng, *config.launch_angle))
        apex = world.height + random_range(rng, *config.apex_overshoot)
        v0 = math.sqrt(2 * config.gravity * apex)
        vy = -math.sin(angle) * v0
        if self.aim_at is not None:
            vx = self._aimed_vx(x, y, vy, rng)
        else:
            direction = 1.0 if from_left else -1.0
            vx = math.cos(angle) * v0 * config.launch_spread * direction

        return world.spawn(
            Item(
                category=category,
                position=(x, y),
                velocity=(vx, vy),
                kind=spec.kind,
                color=spec.color,
                score_value=spec.score,
                rotation_speed=random_range(rng, *config.rotation_speed),
                scale=config.item_scale,
            )
        )

    def burst(self, world: World, rng: random.Random, count: int) -> list[EntityId]:
        return [self.launch(world, rng) for _ in range(count)]

    def _aimed_vx(self, x: float, y: float, vy: float, rng: random.Random) -> float:
        # Time to rise to the target's height; the apex if the arc stays short.
        tx, ty = self.aim_at
        g = self.config.gravity
        disc = vy * vy - 2 * g * (y - ty)
        if disc >= 0:
            t = (-vy - math.sqrt(disc)) / g
        else:
            t = -vy / g
        jitter = self.config.aim_jitter
        return (tx - x) / max(t, 1.0) * (1 + random_range(rng, -jitter, jitter))
