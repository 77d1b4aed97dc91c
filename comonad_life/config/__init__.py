"""Configuration layer: constants and typed config dataclasses."""

from comonad_life.config.constants import (
    ANSI_CLEAR,
    ANSI_HOME,
    DEAD_CHAR,
    GRID_HEIGHT,
    GRID_WIDTH,
    LIVE_CHAR,
    LIVE_PROBABILITY,
    MOORE_OFFSETS,
    NUM_STEPS,
    RANDOM_PATTERN,
)
from comonad_life.config.types import Bound, RunConfig

__all__ = [
    "ANSI_CLEAR",
    "ANSI_HOME",
    "Bound",
    "DEAD_CHAR",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "LIVE_CHAR",
    "LIVE_PROBABILITY",
    "MOORE_OFFSETS",
    "NUM_STEPS",
    "RANDOM_PATTERN",
    "RunConfig",
]
