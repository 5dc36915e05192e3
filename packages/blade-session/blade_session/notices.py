"""NoticeBoard - short on-screen messages driven by game signals."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from blade import signals
from blade_session.components import Notice

if TYPE_CHECKING:
    from blade import FrameContext, GameConfig, SignalBus, World


class NoticeBoard:
    """Holds at most one notice; a newer one replaces the current one."""

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self.current: Notice | None = None

    def show(self, text: str, frames: int | None = None) -> None:
        frames = frames if frames is not None else self.config.notice_frames
        self.current = Notice(text, frames, frames)

    def tick(self) -> None:
        if self.current is None:
            return
        self.current.frames_left -= 1
        if self.current.frames_left <= 0:
            self.current = None

    def attach(self, bus: SignalBus) -> None:
        """Subscribe to the signals that raise a notice."""
        start_frames = self.config.start_notice_frames
        texts: dict[str, Callable[[dict[str, Any]], str]] = {
            signals.SPEED_UP: lambda d: "SPEED UP!",
            signals.MISS: lambda d: "MISS!",
            signals.BOMB: lambda d: f"BOMB! -{d['penalty']}",
            signals.FREEZE: lambda d: "FREEZE!",
            signals.BONUS: lambda d: "BONUS!",
            signals.COMBO: lambda d: f"COMBO x{d['multiplier']}!",
            signals.TARGET_HIT: lambda d: "OUCH!",
        }
        for name, render in texts.items():
            bus.subscribe(name, lambda _n, d, render=render: self.show(render(d)))
        bus.subscribe(signals.ROUND_START, lambda _n, d: self.show("START!", start_frames))


def make_notice_system(board: NoticeBoard) -> Callable[[World, FrameContext], None]:
    def notice_system(world: World, ctx: FrameContext) -> None:
        board.tick()

    return notice_system
