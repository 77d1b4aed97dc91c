"""Visualization: terminal text frames and matplotlib snapshots."""

from comonad_life.viz.render import render_snapshot, to_array
from comonad_life.viz.text import chunks, render_frame, render_text

__all__ = [
    "chunks",
    "render_frame",
    "render_snapshot",
    "render_text",
    "to_array",
]
