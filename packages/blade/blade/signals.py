"""In-process signal bus. Publishes queue up during a frame and are
delivered together by the bus system at the end of the frame."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from blade.types import FrameContext
    from blade.world import World

Handler = Callable[[str, dict[str, Any]], None]

ROUND_START = "round_start"
ROUND_END = "round_end"
EXIT = "exit"
SLICED = "sliced"
BOMB = "bomb"
FREEZE = "freeze"
BONUS = "bonus"
COMBO = "combo"
MISS = "miss"
TARGET_HIT = "target_hit"
SPEED_UP = "speed_up"


class SignalBus:

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        # Handlers may publish again; those land in the next flush.
        batch, self._queue = self._queue, []
        for signal_name, data in batch:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()


def make_signal_system(bus: SignalBus) -> Callable[["World", "FrameContext"], None]:
    def signal_system(world: "World", ctx: "FrameContext") -> None:
        bus.flush()

    return signal_system
