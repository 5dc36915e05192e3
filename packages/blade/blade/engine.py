"""Engine - fixed-step frame loop for one round's systems."""

import os
import random

from blade.clock import FrameClock
from blade.types import FrameContext, Hook, System
from blade.world import World


class Engine:
    """Calls every system once per frame, in registration order.

    The caller owns pacing: ``step`` advances exactly one frame and returns
    the context the systems saw. A system that calls ``ctx.request_stop()``
    cuts its frame short and ends ``run``; the next ``step`` starts clean.
    Start and stop hooks only fire around ``run``.
    """

    def __init__(
        self,
        fps: int = 60,
        seed: int | None = None,
        world: World | None = None,
    ) -> None:
        self._clock = FrameClock(fps)
        self._world = world if world is not None else World()
        self._systems: list[System] = []
        self._hooks: dict[str, list[Hook]] = {"start": [], "stop": []}
        self._halt = False
        self._seed = seed if seed is not None else int.from_bytes(os.urandom(8))
        self._rng = random.Random(self._seed)

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def stopped(self) -> bool:
        return self._halt

    @property
    def systems(self) -> tuple[System, ...]:
        return tuple(self._systems)

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def add_systems(self, *systems: System) -> None:
        self._systems.extend(systems)

    def on_start(self, hook: Hook) -> None:
        self._hooks["start"].append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._hooks["stop"].append(hook)

    def _halt_frame(self) -> None:
        self._halt = True

    def _context(self) -> FrameContext:
        return self._clock.context(self._halt_frame, self._rng)

    def _fire(self, event: str) -> None:
        ctx = self._context()
        for hook in self._hooks[event]:
            hook(self._world, ctx)

    def _advance(self) -> FrameContext:
        self._clock.advance()
        ctx = self._context()
        for system in self._systems:
            system(self._world, ctx)
            if self._halt:
                break
        return ctx

    def step(self) -> FrameContext:
        self._halt = False
        return self._advance()

    def run(self, frames: int) -> int:
        """Advance up to ``frames`` frames; returns how many actually ran."""
        self._halt = False
        self._fire("start")
        done = 0
        while done < frames and not self._halt:
            self._advance()
            done += 1
        self._fire("stop")
        return done
