"""Tests for comonad_life.domain.coord."""

from __future__ import annotations

import pytest

from comonad_life.domain.coord import Bound, Coord, floor_mod, normalize
from comonad_life.errors import InvalidBound, InvalidModulus


class TestFloorMod:
    @pytest.mark.parametrize(
        ("a", "n", "expected"),
        [(7, 5, 2), (-1, 5, 4), (-5, 5, 0), (-6, 5, 4), (0, 1, 0), (12, 4, 0)],
    )
    def test_result_is_non_negative(self, a: int, n: int, expected: int) -> None:
        assert floor_mod(a, n) == expected

    @pytest.mark.parametrize("n", [0, -3])
    def test_non_positive_modulus_rejected(self, n: int) -> None:
        with pytest.raises(InvalidModulus):
            floor_mod(3, n)


class TestCoord:
    def test_construction_wraps_into_bound(self) -> None:
        c = Bound(5, 4).coord(-1, 9)
        assert (c.x, c.y) == (4, 1)

    def test_normalize_matches_bound_coord(self) -> None:
        assert normalize(-7, 13, 5, 4) == Bound(5, 4).coord(-7, 13)

    def test_normalize_rejects_invalid_bound(self) -> None:
        with pytest.raises(InvalidBound):
            normalize(1, 1, 0, 4)

    def test_addition_wraps(self) -> None:
        bound = Bound(5, 5)
        assert bound.coord(4, 4) + bound.coord(2, 1) == bound.coord(1, 0)

    def test_translate_wraps_negative_offsets(self) -> None:
        c = Bound(5, 5).coord(0, 0).translate(-1, -1)
        assert c.as_tuple() == (4, 4)

    def test_equality_and_hash_by_position(self) -> None:
        bound = Bound(5, 5)
        a = bound.coord(1, 2)
        b = Coord(6, -3, bound)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_coord_is_immutable(self) -> None:
        c = Bound(5, 5).coord(1, 2)
        with pytest.raises(AttributeError):
            c.x = 3  # type: ignore[misc]

    def test_add_rejects_non_coord(self) -> None:
        with pytest.raises(TypeError):
            Bound(5, 5).coord(1, 1) + (1, 1)  # type: ignore[operator]
