"""Seed patterns and random soups for the initial live-cell set."""

from __future__ import annotations

import logging
from random import Random
from typing import TYPE_CHECKING

from comonad_life.config.constants import RANDOM_PATTERN
from comonad_life.domain.coord import Bound, Coord

if TYPE_CHECKING:
    from comonad_life.config.types import RunConfig

logger = logging.getLogger(__name__)

Pattern = tuple[tuple[int, int], ...]
"""Live-cell offsets relative to the pattern's top-left corner."""

GLIDER: Pattern = ((1, 0), (2, 1), (0, 2), (1, 2), (2, 2))

BLINKER: Pattern = ((0, 0), (1, 0), (2, 0))

BEACON: Pattern = ((0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3))

BLOCK: Pattern = ((0, 0), (1, 0), (0, 1), (1, 1))

PATTERNS: dict[str, Pattern] = {
    "beacon": BEACON,
    "blinker": BLINKER,
    "block": BLOCK,
    "glider": GLIDER,
}


def place(pattern: Pattern, x: int, y: int, bound: Bound) -> frozenset[Coord]:
    """Translate ``pattern`` to ``(x, y)``, wrapping around ``bound``."""
    return frozenset(bound.coord(px + x, py + y) for px, py in pattern)


def random_soup(bound: Bound, rng: Random, live_probability: float) -> frozenset[Coord]:
    """Each cell is alive independently with ``live_probability``."""
    return frozenset(c for c in bound.coords() if rng.random() < live_probability)


def seed_cells(config: RunConfig, rng: Random) -> frozenset[Coord]:
    """Resolve the initial live set described by ``config``."""
    if config.pattern == RANDOM_PATTERN:
        cells = random_soup(config.bound, rng, config.live_probability)
    else:
        x, y = config.origin
        cells = place(PATTERNS[config.pattern], x, y, config.bound)
    logger.info(
        "seeded %d live cells (%s) on %dx%d",
        len(cells),
        config.pattern,
        config.bound.width,
        config.bound.height,
    )
    return cells
