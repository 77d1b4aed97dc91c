"""Matplotlib-based snapshot rendering of a Life grid."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from comonad_life.domain.life import Grid

DEAD_COLOR = "#F0F0F0"
LIVE_COLOR = "#212121"
GRID_LINE_COLOR = "#CCCCCC"

# Above this many cells per axis the grid lines drown out the cells.
_MAX_GRID_LINE_CELLS = 64


def to_array(grid: Grid) -> np.ndarray:
    """Return an (H, W) bool array of cell liveness."""
    bound = grid.bound
    return np.fromiter(grid.table, dtype=bool, count=bound.size).reshape(
        bound.height, bound.width
    )


def render_snapshot(grid: Grid, output_path: Path, title: str | None = None) -> None:
    """Write a PNG of ``grid`` to ``output_path``."""
    cells = to_array(grid)
    h, w = cells.shape
    scale = 6.0 / max(h, w)
    fig, ax = plt.subplots(figsize=(max(w * scale, 1.0), max(h * scale, 1.0)))
    cmap = ListedColormap([DEAD_COLOR, LIVE_COLOR])
    ax.imshow(cells.astype(int), cmap=cmap, vmin=0, vmax=1, origin="upper", aspect="equal")
    if max(h, w) <= _MAX_GRID_LINE_CELLS:
        for x in range(w + 1):
            ax.axvline(x - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
        for y in range(h + 1):
            ax.axhline(y - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    if title is not None:
        ax.set_title(title)
    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
