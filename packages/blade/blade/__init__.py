"""blade - Fixed-timestep core for a hand-tracked slicing arcade game."""

from blade.clock import FrameClock
from blade.components import Category, Half, Item, Particle
from blade.config import DURATION_CHOICES, GameConfig, RoundSettings, load_config, parse_mode
from blade.engine import Engine
from blade.modes import Mode, ModeRules, rules_for
from blade.signals import SignalBus, make_signal_system
from blade.state import SessionState
from blade.types import ConfigError, DeadEntityError, EntityId, FrameContext
from blade.world import World

__all__ = [
    "Category",
    "ConfigError",
    "DURATION_CHOICES",
    "DeadEntityError",
    "Engine",
    "EntityId",
    "FrameClock",
    "FrameContext",
    "GameConfig",
    "Half",
    "Item",
    "Mode",
    "ModeRules",
    "Particle",
    "RoundSettings",
    "SessionState",
    "SignalBus",
    "World",
    "load_config",
    "make_signal_system",
    "parse_mode",
    "rules_for",
]
