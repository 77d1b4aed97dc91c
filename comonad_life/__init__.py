"""Toroidal Game of Life built on a focused, representable grid comonad."""

from comonad_life.config.types import Bound, RunConfig
from comonad_life.domain.coord import Coord, normalize
from comonad_life.domain.grid import FocusedGrid
from comonad_life.domain.life import Grid, conway, make_grid, step
from comonad_life.domain.representable import DenseTable
from comonad_life.errors import InvalidBound, InvalidModulus

__all__ = [
    "Bound",
    "Coord",
    "DenseTable",
    "FocusedGrid",
    "Grid",
    "InvalidBound",
    "InvalidModulus",
    "RunConfig",
    "conway",
    "make_grid",
    "normalize",
    "step",
]
