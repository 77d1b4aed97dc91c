"""Configuration dataclasses for grid bounds and driver runs.

All config objects are frozen and validate themselves in ``__post_init__``
so that a bad configuration fails before any grid is built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from comonad_life.config.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    LIVE_PROBABILITY,
    NUM_STEPS,
    RANDOM_PATTERN,
)
from comonad_life.domain.coord import Bound

__all__ = [
    "Bound",
    "RunConfig",
]


@dataclass(frozen=True)
class RunConfig:
    """Runtime knobs for one driver run over a fixed bound."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    steps: int = NUM_STEPS
    pattern: str = RANDOM_PATTERN
    """Named pattern to place, or ``"random"`` for a random soup."""
    origin: tuple[int, int] = (0, 0)
    """Offset at which a named pattern is placed."""
    seed: int = 0
    live_probability: float = LIVE_PROBABILITY
    render: bool = False
    """Redraw every generation to the terminal."""
    snapshot_path: Path | None = None
    """Write a PNG of the final generation here when set."""
    bound: Bound = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bound", Bound(self.width, self.height))
        if self.steps < 0:
            raise ValueError("steps must be >= 0")
        if not 0.0 <= self.live_probability <= 1.0:
            raise ValueError("live_probability must be in [0.0, 1.0]")
        from comonad_life.patterns import PATTERNS

        if self.pattern != RANDOM_PATTERN and self.pattern not in PATTERNS:
            valid = ", ".join([RANDOM_PATTERN, *sorted(PATTERNS)])
            raise ValueError(f"pattern must be one of {valid}")
