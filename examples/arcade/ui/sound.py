"""Synthesized sound effects; no audio files needed."""
from __future__ import annotations

import logging

import numpy as np
import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


def _envelope(n: int, attack_s: float = 0.005) -> np.ndarray:
    attack = max(1, int(attack_s * SAMPLE_RATE))
    env = np.exp(-np.linspace(0.0, 5.0, n))
    env[:attack] *= np.linspace(0.0, 1.0, attack)
    return env


def _to_sound(wave: np.ndarray, volume: float) -> pygame.mixer.Sound:
    samples = (np.clip(wave * volume, -1.0, 1.0) * 32767).astype(np.int16)
    return pygame.sndarray.make_sound(np.ascontiguousarray(np.column_stack((samples, samples))))


def _sweep(start_hz: float, end_hz: float, duration: float, kind: str) -> np.ndarray:
    n = int(SAMPLE_RATE * duration)
    freq = np.geomspace(start_hz, end_hz, n)
    phase = 2 * np.pi * np.cumsum(freq) / SAMPLE_RATE
    if kind == "square":
        wave = np.sign(np.sin(phase))
    elif kind == "sawtooth":
        cycles = phase / (2 * np.pi)
        wave = 2 * (cycles - np.floor(0.5 + cycles))
    else:
        wave = np.sin(phase)
    return wave * _envelope(n)


def _noise(duration: float, rng: np.random.Generator) -> np.ndarray:
    n = int(SAMPLE_RATE * duration)
    return rng.uniform(-1.0, 1.0, n) * _envelope(n)


class SoundBank:
    """Named effects, silent when the mixer cannot start."""

    def __init__(self) -> None:
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2)
        except pygame.error as exc:
            logger.warning("sound disabled: %s", exc)
            return
        rng = np.random.default_rng(7)
        self._sounds = {
            "swish": _to_sound(_noise(0.15, rng), 0.3),
            "splat": _to_sound(_sweep(150, 40, 0.1, "sawtooth"), 0.5),
            "bomb": _to_sound(_sweep(100, 10, 0.5, "square"), 0.6),
            "freeze": _to_sound(_sweep(900, 1800, 0.25, "sine"), 0.3),
            "miss": _to_sound(_sweep(300, 120, 0.2, "sine"), 0.4),
        }

    @property
    def enabled(self) -> bool:
        return bool(self._sounds)

    def play(self, name: str) -> None:
        sound = self._sounds.get(name)
        if sound is not None:
            sound.play()
