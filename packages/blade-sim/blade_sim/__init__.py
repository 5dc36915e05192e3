"""blade-sim - Item catalog, spawning, half fade-out and particle systems."""
from __future__ import annotations

from blade_sim.catalog import EXPLOSION_COLOR, FRUITS, SPECIALS, ItemSpec, draw_category, spec_for
from blade_sim.spawner import Spawner
from blade_sim.systems import (
    make_fade_system,
    make_particle_system,
    make_spawn_system,
    opacity,
    spawn_interval,
)

__all__ = [
    "EXPLOSION_COLOR",
    "FRUITS",
    "ItemSpec",
    "SPECIALS",
    "Spawner",
    "draw_category",
    "make_fade_system",
    "make_particle_system",
    "make_spawn_system",
    "opacity",
    "spawn_interval",
    "spec_for",
]
