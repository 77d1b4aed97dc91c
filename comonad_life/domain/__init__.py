"""Domain layer: toroidal coordinates, dense tables, focused grids and the Life rule."""

from comonad_life.domain.coord import Bound, Coord, floor_mod, normalize
from comonad_life.domain.grid import FocusedGrid
from comonad_life.domain.life import (
    Grid,
    conway,
    live_cells,
    make_grid,
    neighbour_coords,
    population,
    run,
    step,
    whole_domain,
)
from comonad_life.domain.representable import DenseTable, Pair, Representable
from comonad_life.domain.store import MemoStore, Store, memoize

__all__ = [
    "Bound",
    "Coord",
    "DenseTable",
    "FocusedGrid",
    "Grid",
    "MemoStore",
    "Pair",
    "Representable",
    "Store",
    "conway",
    "floor_mod",
    "live_cells",
    "make_grid",
    "memoize",
    "neighbour_coords",
    "normalize",
    "population",
    "run",
    "step",
    "whole_domain",
]
