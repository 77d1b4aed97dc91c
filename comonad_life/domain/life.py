"""Conway's Game of Life on a focused toroidal grid.

The rule is written as a grid-local function (``conway``) that only looks
at the focus and its Moore neighbourhood; ``step`` lifts it to the whole
domain with comonadic ``extend``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from comonad_life.config.constants import MOORE_OFFSETS
from comonad_life.domain.coord import Bound, Coord
from comonad_life.domain.grid import FocusedGrid
from comonad_life.domain.representable import DenseTable

logger = logging.getLogger(__name__)

Grid = FocusedGrid[bool]
"""A focused grid of cell liveness."""


def neighbour_coords(c: Coord) -> list[Coord]:
    """The 8 Moore neighbours of ``c``, wrapped around the torus."""
    return [c.translate(dx, dy) for dx, dy in MOORE_OFFSETS]


def conway(grid: Grid) -> bool:
    """Next state of the focused cell under the birth/survival/death rule."""
    alive = grid.extract()
    live_count = sum(1 for state in grid.experiment(neighbour_coords) if state)

    if alive and (live_count < 2 or live_count > 3):
        return False
    if alive and live_count in (2, 3):
        return True
    if not alive and live_count == 3:
        return True
    return alive


def step(grid: Grid) -> Grid:
    """Compute the next generation for every cell of ``grid``."""
    return grid.extend(conway)


def make_grid(live: Iterable[Coord], width: int, height: int) -> Grid:
    """Build a grid focused at ``(0, 0)`` where exactly ``live`` cells are alive.

    Live coordinates are re-wrapped into the ``width`` x ``height`` bound, so
    cells built against a different bound land where their raw position
    wraps to.
    """
    bound = Bound(width, height)
    cells = frozenset((c.x % width, c.y % height) for c in live)
    table = DenseTable.tabulate(bound, lambda c: (c.x, c.y) in cells)
    return FocusedGrid(table=table, focus=bound.coord(0, 0))


def whole_domain(bound: Bound) -> Callable[[Coord], list[Coord]]:
    """Relation mapping any focus to every coordinate in row-major order."""
    coords = list(bound.coords())
    return lambda _focus: coords


def live_cells(grid: Grid) -> frozenset[Coord]:
    """Coordinates of every live cell."""
    relate = whole_domain(grid.bound)
    coords = relate(grid.focus)
    return frozenset(c for c, alive in zip(coords, grid.experiment(relate)) if alive)


def population(grid: Grid) -> int:
    return sum(1 for alive in grid.table if alive)


def run(grid: Grid, generations: int) -> Iterator[Grid]:
    """Yield ``generations`` successive generations after ``grid``.

    Only the most recent generation is referenced between yields, so each
    superseded table can be reclaimed as soon as its successor is built.
    """
    if generations < 0:
        raise ValueError("generations must be >= 0")
    current = grid
    for generation in range(1, generations + 1):
        current = step(current)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("generation %d built (%d live)", generation, population(current))
        yield current
