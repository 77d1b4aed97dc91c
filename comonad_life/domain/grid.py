"""Focused bounded grid: a dense table paired with a current coordinate.

``FocusedGrid`` is the store comonad specialised to a representable
container (``RepresentableStore<DenseTable, Coord, A>``). ``extract`` reads
the value at the focus; ``duplicate`` builds, in one eager pass, the grid
focused everywhere at once; ``extend`` maps a grid-local function over that
snapshot to produce the next generation.

Every cell of an ``extend`` pass reads from the same, already complete
table, so a generation costs exactly one table build regardless of how
many generations preceded it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from comonad_life.domain.coord import Bound, Coord
from comonad_life.domain.representable import DenseTable

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class FocusedGrid(Generic[A]):
    """Immutable ``(table, focus)`` pair."""

    table: DenseTable[A]
    focus: Coord

    def __post_init__(self) -> None:
        object.__setattr__(self, "focus", self.table.bound.wrap(self.focus))

    @property
    def bound(self) -> Bound:
        return self.table.bound

    def peek(self, c: Coord) -> A:
        return self.table.index(c)

    def extract(self) -> A:
        """Value at the focus."""
        return self.peek(self.focus)

    def experiment(self, relate: Callable[[Coord], Iterable[Coord]]) -> list[A]:
        """Values at ``relate(focus)``, in the order ``relate`` produces them."""
        return [self.peek(c) for c in relate(self.focus)]

    def seek(self, c: Coord) -> FocusedGrid[A]:
        """Refocus at ``c``.

        Equivalent to ``self.duplicate().peek(c)`` but skips the full
        duplicate build, since refocusing never touches the table.
        """
        return FocusedGrid(table=self.table, focus=c)

    def map(self, f: Callable[[A], B]) -> FocusedGrid[B]:
        return FocusedGrid(table=self.table.map(f), focus=self.focus)

    def duplicate(self) -> FocusedGrid[FocusedGrid[A]]:
        """The grid focused at every coordinate, sharing this grid's table."""
        table = self.table
        return FocusedGrid(
            table=DenseTable.tabulate(
                table.bound, lambda c: FocusedGrid(table=table, focus=c)
            ),
            focus=self.focus,
        )

    def extend(self, f: Callable[[FocusedGrid[A]], B]) -> FocusedGrid[B]:
        """Apply a grid-local ``f`` at every coordinate; ``duplicate().map(f)``."""
        return self.duplicate().map(f)
