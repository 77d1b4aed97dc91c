"""Centralized constants for the toroidal Life grid and its driver.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_WIDTH = 400
"""Default grid width in cells."""

GRID_HEIGHT = 150
"""Default grid height in cells."""

NUM_STEPS = 100
"""Default number of generations computed by the driver."""

LIVE_PROBABILITY = 0.5
"""Per-cell probability of being alive in a random soup."""

LIVE_CHAR = "#"
"""Text glyph for a live cell."""

DEAD_CHAR = " "
"""Text glyph for a dead cell."""

ANSI_HOME = "\x1b[;H"
"""Move the terminal cursor to the top-left corner."""

ANSI_CLEAR = "\x1b[2J"
"""Clear the whole terminal screen."""

MOORE_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)
"""Relative (dx, dy) offsets of the 8 Moore-neighbourhood cells."""

RANDOM_PATTERN = "random"
"""Pattern name that selects a random soup instead of a fixed pattern."""
