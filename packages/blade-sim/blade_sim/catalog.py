"""Item catalog: the fruit pool and the special items."""
from __future__ import annotations

import random
from dataclasses import dataclass

from blade import Category, GameConfig
from blade.components import Color


@dataclass(frozen=True)
class ItemSpec:
    kind: str
    color: Color
    score: int = 0


FRUITS: tuple[ItemSpec, ...] = (
    ItemSpec("watermelon", (255, 85, 85), 1),
    ItemSpec("banana", (255, 255, 85), 1),
    ItemSpec("orange", (255, 170, 0), 1),
    ItemSpec("strawberry", (255, 0, 85), 2),
    ItemSpec("lemon", (255, 255, 0), 1),
    ItemSpec("coconut", (255, 255, 255), 3),
)

SPECIALS: dict[Category, ItemSpec] = {
    Category.BOMB: ItemSpec("bomb", (0, 0, 0), -5),
    Category.ICE: ItemSpec("ice", (0, 255, 255)),
    Category.BASKET: ItemSpec("basket", (210, 180, 140)),
}

EXPLOSION_COLOR: Color = (255, 80, 0)


def draw_category(rng: random.Random, config: GameConfig) -> Category:
    """One weighted draw: thresholds are cumulative, checked in order."""
    roll = rng.random()
    if roll < config.bomb_chance:
        return Category.BOMB
    if roll < config.ice_chance:
        return Category.ICE
    if roll < config.basket_chance:
        return Category.BASKET
    return Category.FRUIT


def spec_for(category: Category, rng: random.Random) -> ItemSpec:
    if category is Category.FRUIT:
        return rng.choice(FRUITS)
    return SPECIALS[category]
