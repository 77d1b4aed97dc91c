"""Tests for comonad_life.domain.store: lazy and memoised store comonads."""

from __future__ import annotations

from comonad_life.domain.coord import Bound, Coord
from comonad_life.domain.life import conway, live_cells, make_grid, step
from comonad_life.domain.store import MemoStore, Store, memoize

BOUND = Bound(5, 5)
BLINKER = frozenset(BOUND.coord(x, 2) for x in (1, 2, 3))


def _counting_store() -> tuple[Store[int, int], list[int]]:
    calls: list[int] = []

    def peek(s: int) -> int:
        calls.append(s)
        return s * s

    return Store(peek=peek, pos=3), calls


class TestMemoize:
    def test_calls_underlying_function_once_per_key(self) -> None:
        calls: list[int] = []

        def square(n: int) -> int:
            calls.append(n)
            return n * n

        cached = memoize(square)
        assert [cached(2), cached(2), cached(3)] == [4, 4, 9]
        assert calls == [2, 3]


class TestStore:
    def test_extract_reads_position(self) -> None:
        store, _ = _counting_store()
        assert store.extract() == 9

    def test_seek_then_extract(self) -> None:
        store, _ = _counting_store()
        assert store.seek(5).extract() == 25

    def test_experiment_reads_related_positions(self) -> None:
        store, _ = _counting_store()
        assert store.experiment(lambda s: [s - 1, s + 1]) == [4, 16]

    def test_extend_extract_is_identity_pointwise(self) -> None:
        store, _ = _counting_store()
        extended = store.extend(Store.extract)
        assert [extended.peek(s) for s in range(5)] == [store.peek(s) for s in range(5)]

    def test_lazy_extend_recomputes_on_every_read(self) -> None:
        store, calls = _counting_store()
        extended = store.extend(lambda w: w.extract() + 1)
        extended.extract()
        extended.extract()
        assert calls == [3, 3]


class TestMemoStore:
    def test_memoised_extend_computes_each_position_once(self) -> None:
        calls: list[int] = []

        def peek(s: int) -> int:
            calls.append(s)
            return s

        extended = MemoStore(peek=peek, pos=1).extend(lambda w: w.extract() * 2)
        assert extended.extract() == 2
        assert extended.extract() == 2
        assert extended.seek(4).extract() == 8
        assert calls == [1, 4]


class TestAgreementWithFocusedGrid:
    def _store_grid(self) -> Store[Coord, bool]:
        cells = {c.as_tuple() for c in BLINKER}
        return Store(peek=lambda c: c.as_tuple() in cells, pos=BOUND.coord(0, 0))

    def _memo_grid(self) -> MemoStore[Coord, bool]:
        cells = {c.as_tuple() for c in BLINKER}
        return MemoStore(peek=lambda c: c.as_tuple() in cells, pos=BOUND.coord(0, 0))

    def test_lazy_store_matches_dense_grid_over_two_generations(self) -> None:
        expected = step(step(make_grid(BLINKER, 5, 5)))
        store = self._store_grid().extend(conway).extend(conway)
        got = frozenset(c for c in BOUND.coords() if store.peek(c))
        assert got == live_cells(expected)

    def test_memo_store_matches_dense_grid_over_two_generations(self) -> None:
        expected = step(step(make_grid(BLINKER, 5, 5)))
        store = self._memo_grid().extend(conway).extend(conway)
        got = frozenset(c for c in BOUND.coords() if store.peek(c))
        assert got == live_cells(expected)
