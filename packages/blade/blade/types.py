"""Shared type aliases and errors for the blade engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

EntityId = int


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame: int
    dt: float
    now_ms: float
    request_stop: Callable[[], None]
    random: _random.Random


class DeadEntityError(KeyError):
    """Raised when operating on an entity that is no longer in the world."""

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


class ConfigError(ValueError):
    """Raised when a configuration value is rejected before a round starts."""


if TYPE_CHECKING:
    from blade.world import World

System = Callable[["World", FrameContext], None]
Hook = Callable[["World", FrameContext], None]
