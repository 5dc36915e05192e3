"""Data model for everything that flies across the playfield."""
from __future__ import annotations

import enum
from dataclasses import dataclass

Color = tuple[int, int, int]


class Category(enum.Enum):
    FRUIT = "fruit"
    BOMB = "bomb"
    ICE = "ice"
    BASKET = "basket"


class Half(enum.Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Item:
    """A spawned object in flight.

    ``id`` is assigned by ``World.spawn``. A whole item has ``halved`` set to
    ``Half.NONE`` and no ``sliced_at``; the two halves produced by a slice
    share the ``sliced_at`` timestamp (simulation milliseconds).
    """

    category: Category
    position: tuple[float, float]
    velocity: tuple[float, float]
    kind: str = ""
    color: Color = (255, 255, 255)
    score_value: int = 0
    rotation: float = 0.0
    rotation_speed: float = 0.0
    scale: float = 1.0
    halved: Half = Half.NONE
    sliced_at: float | None = None
    id: int = -1

    @property
    def is_half(self) -> bool:
        return self.halved is not Half.NONE


@dataclass
class Particle:
    """Transient hit debris. Removed once ``life`` drops to zero."""

    position: tuple[float, float]
    velocity: tuple[float, float]
    color: Color
    size: float
    life: float = 1.0
