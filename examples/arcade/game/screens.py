"""Menu and results screens: hover a button, close the hand, hold."""
from __future__ import annotations

from blade import DURATION_CHOICES, GameConfig, Mode, RoundSettings
from blade_board import Entry
from blade_gesture import GestureReader, HandLandmarks, LatestValue, Pointer, Trail
from blade_select import SelectionMachine, Target
from blade_session import RoundResult

BUTTON_W, BUTTON_H = 300, 110
SMALL_W, SMALL_H = 140, 70

MODE_TARGETS = {
    "mode-timed": Mode.TIMED,
    "mode-survival": Mode.SURVIVAL,
    "mode-dodge": Mode.DODGE,
}
MODE_LABELS = {
    "mode-timed": "TIME ATTACK",
    "mode-survival": "SURVIVAL",
    "mode-dodge": "PROTECT",
}


class HoldScreen:
    """Pointer tracking plus a hold-to-confirm machine over fixed buttons."""

    def __init__(self, hands: LatestValue[HandLandmarks], config: GameConfig, targets: list[Target]) -> None:
        self.hands = hands
        self.config = config
        self.reader = GestureReader(
            config.width, config.height, Trail(max_length=1), stale_frames=config.stale_frames
        )
        self.machine = SelectionMachine(config.hold_ms, targets)

    @property
    def pointer(self) -> Pointer | None:
        return self.reader.pointer

    @property
    def targets(self) -> list[Target]:
        return self.machine.targets

    def poll(self, now_ms: float) -> str | None:
        pointer = self.reader.update(self.hands, now_ms)
        return self.machine.update(pointer, now_ms)


def _row(ids: list[str], w: float, h: float, y: float, screen_w: float, gap: float) -> list[Target]:
    total = len(ids) * w + (len(ids) - 1) * gap
    x0 = (screen_w - total) / 2
    return [Target(tid, (x0 + i * (w + gap), y, w, h)) for i, tid in enumerate(ids)]


class MenuScreen(HoldScreen):
    def __init__(
        self,
        hands: LatestValue[HandLandmarks],
        config: GameConfig,
        leaders: list[Entry],
        duration: int = DURATION_CHOICES[0],
    ) -> None:
        width, height = config.width, config.height
        durations = [f"time-{d}" for d in DURATION_CHOICES]
        targets = _row(durations, SMALL_W, SMALL_H, height * 0.38, width, 30)
        targets += _row(list(MODE_TARGETS), BUTTON_W, BUTTON_H, height * 0.55, width, 40)
        super().__init__(hands, config, targets)
        self.leaders = leaders
        self.duration = duration

    def poll(self, now_ms: float) -> RoundSettings | None:
        chosen = super().poll(now_ms)
        if chosen is None:
            return None
        if chosen.startswith("time-"):
            self.duration = int(chosen.split("-", 1)[1])
            return None
        return RoundSettings(mode=MODE_TARGETS[chosen], duration=self.duration)


class ResultsScreen(HoldScreen):
    def __init__(
        self,
        hands: LatestValue[HandLandmarks],
        config: GameConfig,
        result: RoundResult,
        rank: int | None,
    ) -> None:
        targets = _row(["restart", "home"], BUTTON_W, BUTTON_H, config.height * 0.72, config.width, 60)
        super().__init__(hands, config, targets)
        self.result = result
        self.rank = rank
