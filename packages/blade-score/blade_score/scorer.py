"""Scorer - per-category hit resolution, misses and target hits."""
from __future__ import annotations

import dataclasses
import logging
import random
from typing import Callable

from blade import Category, FrameContext, GameConfig, Half, Item, Particle, SessionState, SignalBus, World
from blade import signals
from blade.components import Color
from blade_physics import random_range
from blade_sim import EXPLOSION_COLOR, Spawner

logger = logging.getLogger(__name__)

EndRound = Callable[[str], None]


class Scorer:
    """Applies the outcome of every collision to the world and the session.

    ``end_round`` is called with a reason when a life loss empties the
    life counter; the session controller owns the latch. Nothing here
    mutates the session once it is over.
    """

    def __init__(
        self,
        state: SessionState,
        config: GameConfig,
        bus: SignalBus,
        spawner: Spawner,
        end_round: EndRound | None = None,
    ) -> None:
        self.state = state
        self.config = config
        self.bus = bus
        self.spawner = spawner
        self.end_round = end_round

    # -- Slices --

    def resolve(self, world: World, ctx: FrameContext, item: Item) -> None:
        """Resolve a blade hit on a whole item. Halves are never resolved."""
        if self.state.game_over or item.is_half or not world.alive(item.id):
            return
        handler = self._handlers.get(item.category)
        if handler is None:
            if self.config.strict:
                raise ValueError(f"item {item.id} has unknown category {item.category!r}")
            logger.warning("dropping item %d of unknown category %r", item.id, item.category)
            world.despawn(item.id)
            return
        world.despawn(item.id)
        handler(self, world, ctx, item)

    def _fruit(self, world: World, ctx: FrameContext, item: Item) -> None:
        state = self.state
        points = 0 if state.rules.score_seconds else item.score_value
        awarded = points * state.multiplier
        stepped = state.record_hit(points, self.config.combo_step)
        self._split(world, ctx, item)
        self.burst(world, ctx.random, item.position, item.color)
        self.bus.publish(signals.SLICED, kind=item.kind, points=awarded, position=item.position)
        if stepped:
            self.bus.publish(signals.COMBO, multiplier=state.multiplier)

    def _bomb(self, world: World, ctx: FrameContext, item: Item) -> None:
        state = self.state
        if not state.rules.score_seconds:
            state.penalize(self.config.bomb_penalty)
        state.reset_combo()
        state.pause(ctx.now_ms + self.config.bomb_pause_ms)
        self.burst(world, ctx.random, item.position, EXPLOSION_COLOR)
        self.bus.publish(signals.BOMB, penalty=self.config.bomb_penalty, position=item.position)

    def _ice(self, world: World, ctx: FrameContext, item: Item) -> None:
        self.state.start_freeze(self.config.freeze_frames)
        self.burst(world, ctx.random, item.position, item.color)
        self.bus.publish(signals.FREEZE, frames=self.config.freeze_frames)

    def _basket(self, world: World, ctx: FrameContext, item: Item) -> None:
        self.burst(world, ctx.random, item.position, item.color)
        spawned = self.spawner.burst(world, ctx.random, self.config.bonus_spawn_count)
        self.bus.publish(signals.BONUS, count=len(spawned))

    _handlers: dict[Category, Callable[["Scorer", World, FrameContext, Item], None]] = {
        Category.FRUIT: _fruit,
        Category.BOMB: _bomb,
        Category.ICE: _ice,
        Category.BASKET: _basket,
    }

    def _split(self, world: World, ctx: FrameContext, item: Item) -> None:
        dx, dy = self.config.slice_spread
        vx, vy = item.velocity
        for half, offset in ((Half.LEFT, -dx), (Half.RIGHT, dx)):
            world.spawn(
                dataclasses.replace(
                    item,
                    velocity=(vx + offset, vy - dy),
                    halved=half,
                    sliced_at=ctx.now_ms,
                    id=-1,
                )
            )

    def burst(
        self,
        world: World,
        rng: random.Random,
        position: tuple[float, float],
        color: Color,
    ) -> None:
        speed = self.config.particle_speed
        for _ in range(self.config.particle_count):
            world.emit(
                Particle(
                    position=position,
                    velocity=(random_range(rng, -speed, speed), random_range(rng, -speed, speed)),
                    color=color,
                    size=random_range(rng, *self.config.particle_size),
                )
            )

    # -- Life losses --

    def miss(self, world: World, ctx: FrameContext, item: Item, edge: str) -> None:
        """Bounds exit hook: a whole fruit falling off the bottom is a miss."""
        state = self.state
        if state.game_over or not state.rules.penalize_misses:
            return
        if edge != "bottom" or item.is_half or item.category is not Category.FRUIT:
            return
        state.reset_combo()
        lives = state.lose_life()
        self.bus.publish(signals.MISS, x=item.position[0], lives=lives)
        if lives == 0:
            self._deplete("lives")

    def target_hit(self, world: World, ctx: FrameContext, item: Item) -> None:
        """An unsliced item reached the protected target, whatever its category."""
        state = self.state
        if state.game_over or item.is_half or not world.alive(item.id):
            return
        world.despawn(item.id)
        state.reset_combo()
        lives = state.lose_life()
        self.burst(world, ctx.random, item.position, EXPLOSION_COLOR)
        self.bus.publish(signals.TARGET_HIT, kind=item.kind, lives=lives)
        if lives == 0:
            self._deplete("lives")

    def _deplete(self, reason: str) -> None:
        if self.end_round is not None:
            self.end_round(reason)
