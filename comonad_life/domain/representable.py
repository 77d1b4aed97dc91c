"""Representable containers: dense tables isomorphic to functions of a key.

A container is representable when ``tabulate`` and ``index`` witness an
isomorphism with functions from its key type::

    container.retabulate(container.index) == container
    Kind.tabulate(f).index(key) == f(key)

Two independent variants satisfy the protocol: ``Pair`` (keyed by ``bool``)
and ``DenseTable`` (keyed by ``Coord`` over a fixed ``Bound``). The table is
the storage behind ``FocusedGrid``; building one is the single allocation
point for a whole generation.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from comonad_life.domain.coord import Bound, Coord

A = TypeVar("A")
B = TypeVar("B")
K = TypeVar("K")
V = TypeVar("V", covariant=True)


class Representable(Protocol[K, V]):
    """Capability interface for containers indexed by a key type."""

    def index(self, key: K) -> V: ...

    def retabulate(self, generator: Callable[[K], B]) -> Representable[K, B]:
        """Build a container of the same shape from ``generator``."""
        ...


# ---------------------------------------------------------------------------
# Pair
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Pair(Generic[A]):
    """Two-slot container: ``True`` selects ``left``, ``False`` selects ``right``."""

    left: A
    right: A

    @classmethod
    def tabulate(cls, generator: Callable[[bool], A]) -> Pair[A]:
        return cls(left=generator(True), right=generator(False))

    def index(self, key: bool) -> A:
        return self.left if key else self.right

    def retabulate(self, generator: Callable[[bool], B]) -> Pair[B]:
        return Pair.tabulate(generator)

    def map(self, f: Callable[[A], B]) -> Pair[B]:
        return Pair(left=f(self.left), right=f(self.right))


# ---------------------------------------------------------------------------
# Dense table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DenseTable(Generic[A]):
    """Immutable row-major table holding one value per coordinate of ``bound``.

    ``values[y * width + x]`` is the value at ``(x, y)``. The length is always
    exactly ``bound.size``.
    """

    bound: Bound
    values: tuple[A, ...]

    def __post_init__(self) -> None:
        if len(self.values) != self.bound.size:
            raise ValueError(
                f"table for {self.bound.width}x{self.bound.height} needs "
                f"{self.bound.size} values, got {len(self.values)}"
            )

    @classmethod
    def tabulate(cls, bound: Bound, generator: Callable[[Coord], A]) -> DenseTable[A]:
        """Evaluate ``generator`` once per coordinate, eagerly, in row-major order."""
        return cls(bound=bound, values=tuple(generator(c) for c in bound.coords()))

    @classmethod
    def from_values(cls, bound: Bound, values: Sequence[A]) -> DenseTable[A]:
        """Wrap an existing row-major sequence of values."""
        return cls(bound=bound, values=tuple(values))

    def index(self, key: Coord) -> A:
        return self.values[self.bound.linear_index(key)]

    def retabulate(self, generator: Callable[[Coord], B]) -> DenseTable[B]:
        return DenseTable.tabulate(self.bound, generator)

    def map(self, f: Callable[[A], B]) -> DenseTable[B]:
        """Apply ``f`` to every stored value, keeping the linearisation."""
        return DenseTable(bound=self.bound, values=tuple(f(v) for v in self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[A]:
        return iter(self.values)
