"""Tests for the item catalog and the Spawner."""
from __future__ import annotations

import math
import random

import pytest

from blade import Category, GameConfig, World
from blade_sim import FRUITS, SPECIALS, Spawner, draw_category, spec_for


class _FixedRandom(random.Random):
    """Random whose ``random()`` always returns one value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self._value = value

    def random(self) -> float:
        return self._value


class TestCatalog:
    @pytest.mark.parametrize(
        "roll,expected",
        [
            (0.0, Category.BOMB),
            (0.079, Category.BOMB),
            (0.08, Category.ICE),
            (0.119, Category.ICE),
            (0.12, Category.BASKET),
            (0.149, Category.BASKET),
            (0.15, Category.FRUIT),
            (0.99, Category.FRUIT),
        ],
    )
    def test_cumulative_thresholds(self, roll, expected) -> None:
        assert draw_category(_FixedRandom(roll), GameConfig()) is expected

    def test_fruit_scores(self) -> None:
        scores = {spec.kind: spec.score for spec in FRUITS}
        assert scores == {
            "watermelon": 1,
            "banana": 1,
            "orange": 1,
            "strawberry": 2,
            "lemon": 1,
            "coconut": 3,
        }

    def test_specials(self) -> None:
        assert spec_for(Category.BOMB, random.Random(1)) is SPECIALS[Category.BOMB]
        assert spec_for(Category.FRUIT, random.Random(1)) in FRUITS


class TestSpawner:
    def test_launch_from_lateral_third_below_bottom(self) -> None:
        config = GameConfig()
        world = World(config.width, config.height)
        spawner = Spawner(config)
        rng = random.Random(7)
        for _ in range(50):
            item = world.get(spawner.launch(world, rng))
            x, y = item.position
            assert y == config.height + config.spawn_depth
            in_left = config.spawn_inset <= x <= config.width / 3
            in_right = 2 * config.width / 3 <= x <= config.width - config.spawn_inset
            assert in_left or in_right
            vx, vy = item.velocity
            assert vy < 0
            # Horizontal speed points toward the middle.
            assert (vx > 0) == in_left
            assert item.scale == config.item_scale
            assert item.is_half is False

    def test_launch_speed_reaches_above_top_edge(self) -> None:
        config = GameConfig()
        world = World(config.width, config.height)
        spawner = Spawner(config)
        rng = random.Random(3)
        for _ in range(50):
            item = world.get(spawner.launch(world, rng, Category.FRUIT))
            vx, vy = item.velocity
            v0 = math.hypot(vx / config.launch_spread, vy)
            lo = math.sqrt(2 * config.gravity * (config.height + config.apex_overshoot[0]))
            hi = math.sqrt(2 * config.gravity * (config.height + config.apex_overshoot[1]))
            assert lo - 1e-9 <= v0 <= hi + 1e-9

    def test_forced_category(self) -> None:
        config = GameConfig()
        world = World(config.width, config.height)
        eid = Spawner(config).launch(world, random.Random(0), Category.BOMB)
        item = world.get(eid)
        assert item.category is Category.BOMB
        assert item.kind == "bomb"

    def test_burst(self) -> None:
        config = GameConfig()
        world = World(config.width, config.height)
        ids = Spawner(config).burst(world, random.Random(0), 12)
        assert len(set(ids)) == 12
        assert world.count() == 12

    def test_aimed_items_head_for_target(self) -> None:
        config = GameConfig()
        world = World(config.width, config.height)
        spawner = Spawner(config, aim_at=world.center)
        rng = random.Random(11)
        for _ in range(30):
            item = world.get(spawner.launch(world, rng))
            x, _ = item.position
            vx, _ = item.velocity
            assert (vx > 0) == (x < world.center[0])
