"""App - screen flow around one SessionController per round."""
from __future__ import annotations

from typing import Callable

import numpy as np

from blade import GameConfig, RoundSettings, signals
from blade_board import Leaderboard
from blade_gesture import HandLandmarks, LatestValue
from blade_session import Phase, RoundResult, SessionController
from blade_vision import snapshot_jpeg, to_data_url

from game.screens import MenuScreen, ResultsScreen

MENU, PLAY, RESULTS = "menu", "play", "results"
MENU_LEADERS = 5


class App:
    """Owns the current screen and advances the round at a fixed step.

    Render frames and simulation frames are decoupled: ``update`` feeds the
    elapsed wall time into an accumulator and steps the controller once
    per ``1 / config.fps`` seconds.
    """

    def __init__(
        self,
        config: GameConfig,
        hands: LatestValue[HandLandmarks],
        board: Leaderboard,
        latest_frame: Callable[[], np.ndarray | None],
        seed: int | None = None,
        on_round: Callable[[SessionController], None] | None = None,
    ) -> None:
        self.config = config
        self.hands = hands
        self.board = board
        self.latest_frame = latest_frame
        self.seed = seed
        self.on_round = on_round
        self.running = True
        self.screen = MENU
        self.settings: RoundSettings | None = None
        self.controller: SessionController | None = None
        self.menu = MenuScreen(hands, config, board.top(MENU_LEADERS))
        self.results: ResultsScreen | None = None
        self._accumulator = 0.0
        self._step_ms = 1000 / config.fps
        self._rank: int | None = None

    def start_round(self, settings: RoundSettings) -> None:
        self.settings = settings
        self.controller = SessionController(
            settings,
            self.config,
            cell=self.hands,
            snapshot=lambda: snapshot_jpeg(self.latest_frame()),
            on_round_end=self._record,
            seed=self.seed,
        )
        if self.on_round is not None:
            self.on_round(self.controller)
        self._accumulator = 0.0
        self.screen = PLAY

    def go_home(self) -> None:
        self.controller = None
        self.results = None
        self.menu = MenuScreen(self.hands, self.config, self.board.top(MENU_LEADERS), self.menu.duration)
        self.screen = MENU

    def back(self) -> None:
        """Escape key: leave the round, or quit from the menu."""
        if self.screen == PLAY and self.controller is not None:
            self.controller.exit()
        elif self.screen == RESULTS:
            self.go_home()
        else:
            self.running = False

    def update(self, dt_ms: float, now_ms: float) -> None:
        if self.screen == MENU:
            settings = self.menu.poll(now_ms)
            if settings is not None:
                self.start_round(settings)
        elif self.screen == PLAY:
            self._update_play(dt_ms)
        elif self.screen == RESULTS and self.results is not None:
            choice = self.results.poll(now_ms)
            if choice == "restart" and self.settings is not None:
                self.start_round(self.settings)
            elif choice == "home":
                self.go_home()

    def _update_play(self, dt_ms: float) -> None:
        ctrl = self.controller
        # Cap the backlog so a stall does not replay seconds of frames.
        self._accumulator = min(self._accumulator + dt_ms, self._step_ms * 4)
        while self._accumulator >= self._step_ms and not ctrl.done:
            ctrl.step()
            self._accumulator -= self._step_ms
        if ctrl.phase is Phase.EXITED:
            self.go_home()
        elif ctrl.phase is Phase.ENDED and ctrl.result is not None:
            self.results = ResultsScreen(self.hands, self.config, ctrl.result, self._rank)
            self.screen = RESULTS

    def _record(self, result: RoundResult) -> None:
        photo = to_data_url(result.photo) if result.photo is not None else None
        entry = self.board.submit(result.score, result.mode.value, photo, result.timestamp)
        self._rank = None
        if entry is not None:
            ids = [e.id for e in self.board.top()]
            self._rank = ids.index(entry.id) + 1


def subscribe_sounds(controller: SessionController, play: Callable[[str], None]) -> None:
    """Route round signals to named sound effects."""
    controller.bus.subscribe(signals.SLICED, lambda _n, _d: play("splat"))
    controller.bus.subscribe(signals.BOMB, lambda _n, _d: play("bomb"))
    controller.bus.subscribe(signals.TARGET_HIT, lambda _n, _d: play("bomb"))
    controller.bus.subscribe(signals.FREEZE, lambda _n, _d: play("freeze"))
    controller.bus.subscribe(signals.BONUS, lambda _n, _d: play("swish"))
    controller.bus.subscribe(signals.MISS, lambda _n, _d: play("miss"))
