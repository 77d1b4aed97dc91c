"""Plain-text rendering of a boolean grid for terminal output."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from comonad_life.config.constants import ANSI_HOME, DEAD_CHAR, LIVE_CHAR
from comonad_life.domain.life import Grid, whole_domain

T = TypeVar("T")


def chunks(items: Sequence[T], size: int) -> list[Sequence[T]]:
    """Split ``items`` into consecutive slices of ``size`` (last may be shorter)."""
    if size <= 0:
        raise ValueError("chunk size must be >= 1")
    return [items[i : i + size] for i in range(0, len(items), size)]


def render_text(grid: Grid, live: str = LIVE_CHAR, dead: str = DEAD_CHAR) -> str:
    """One text row per grid row, ``live``/``dead`` glyph per cell."""
    glyphs = [live if alive else dead for alive in grid.experiment(whole_domain(grid.bound))]
    return "\n".join("".join(row) for row in chunks(glyphs, grid.bound.width))


def render_frame(grid: Grid) -> str:
    """``render_text`` prefixed with a cursor-home escape for in-place redraw."""
    return ANSI_HOME + render_text(grid)
