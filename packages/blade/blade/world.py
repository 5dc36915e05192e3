"""World - the explicit per-round simulation state handed to every system."""

from __future__ import annotations

from typing import Iterator

from blade.components import Item, Particle
from blade.types import DeadEntityError, EntityId


class World:
    def __init__(self, width: float = 1280, height: float = 720) -> None:
        self.width = width
        self.height = height
        self.particles: list[Particle] = []
        self._items: dict[EntityId, Item] = {}
        self._next_id: int = 0

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 2)

    def spawn(self, item: Item) -> EntityId:
        eid = self._next_id
        self._next_id += 1
        item.id = eid
        self._items[eid] = item
        return eid

    def despawn(self, entity_id: EntityId) -> None:
        self._items.pop(entity_id, None)

    def get(self, entity_id: EntityId) -> Item:
        item = self._items.get(entity_id)
        if item is None:
            raise DeadEntityError(entity_id, f"Entity {entity_id} is not alive")
        return item

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._items

    def items(self, halved: bool | None = None) -> Iterator[Item]:
        """Iterate live items, optionally only whole (False) or only halves (True).

        Iterates over a copy so systems may spawn and despawn while looping.
        """
        for item in list(self._items.values()):
            if item.id not in self._items:
                continue
            if halved is not None and item.is_half != halved:
                continue
            yield item

    def count(self) -> int:
        return len(self._items)

    def emit(self, particle: Particle) -> None:
        self.particles.append(particle)

    def clear(self) -> None:
        self._items.clear()
        self.particles.clear()
