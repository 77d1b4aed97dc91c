"""Toroidal coordinates over a fixed rectangular bound.

Every ``Coord`` is held in normalised form: ``0 <= x < width`` and
``0 <= y < height``. Arithmetic wraps around the edges of the bound, so
moving past one edge re-enters at the opposite one.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from comonad_life.errors import InvalidBound, InvalidModulus


def floor_mod(a: int, n: int) -> int:
    """Return the non-negative remainder of ``a`` modulo ``n``.

    Python's ``%`` already floors for a positive divisor; the guard only
    rejects divisors that no valid bound can produce.
    """
    if n <= 0:
        raise InvalidModulus(f"modulus must be positive, got {n}")
    return a % n


@dataclass(frozen=True)
class Bound:
    """Width and height of the toroidal domain, fixed for a whole run."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidBound(
                f"grid bound must be positive, got {self.width}x{self.height}"
            )

    @property
    def size(self) -> int:
        return self.width * self.height

    def coord(self, x: int, y: int) -> Coord:
        """Build a coordinate wrapped into this bound."""
        return Coord(x, y, self)

    def coords(self) -> Iterator[Coord]:
        """Yield every coordinate in row-major order (y outer, x inner)."""
        for y in range(self.height):
            for x in range(self.width):
                yield Coord(x, y, self)

    def wrap(self, c: Coord) -> Coord:
        """Re-normalise ``c`` into this bound if it was built against another."""
        if c.bound == self:
            return c
        return Coord(c.x, c.y, self)

    def linear_index(self, c: Coord) -> int:
        c = self.wrap(c)
        return c.y * self.width + c.x


@dataclass(frozen=True)
class Coord:
    """Integer grid position, normalised into its bound on construction."""

    x: int
    y: int
    bound: Bound = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", floor_mod(self.x, self.bound.width))
        object.__setattr__(self, "y", floor_mod(self.y, self.bound.height))

    def __add__(self, other: Coord) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x + other.x, self.y + other.y, self.bound)

    def translate(self, dx: int, dy: int) -> Coord:
        """Shift by a raw offset, wrapping around the bound."""
        return Coord(self.x + dx, self.y + dy, self.bound)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


def normalize(x: int, y: int, width: int, height: int) -> Coord:
    """Wrap ``(x, y)`` into a ``width`` x ``height`` torus.

    Raises :exc:`InvalidBound` when either dimension is non-positive.
    """
    return Coord(x, y, Bound(width, height))
