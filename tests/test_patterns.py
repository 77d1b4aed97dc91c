"""Tests for comonad_life.patterns."""

from __future__ import annotations

import logging
from random import Random

import pytest

from comonad_life.config.types import Bound, RunConfig
from comonad_life.patterns import (
    BLINKER,
    GLIDER,
    PATTERNS,
    place,
    random_soup,
    seed_cells,
)


class TestPlace:
    def test_translates_offsets(self) -> None:
        cells = place(BLINKER, 1, 2, Bound(5, 5))
        assert {c.as_tuple() for c in cells} == {(1, 2), (2, 2), (3, 2)}

    def test_wraps_across_edges(self) -> None:
        cells = place(BLINKER, 4, 4, Bound(5, 5))
        assert {c.as_tuple() for c in cells} == {(4, 4), (0, 4), (1, 4)}

    def test_glider_has_five_cells(self) -> None:
        assert len(place(GLIDER, 0, 0, Bound(10, 10))) == 5

    def test_registry_patterns_are_non_empty(self) -> None:
        assert all(len(pattern) > 0 for pattern in PATTERNS.values())


class TestRandomSoup:
    def test_same_seed_same_soup(self) -> None:
        bound = Bound(12, 9)
        assert random_soup(bound, Random(7), 0.5) == random_soup(bound, Random(7), 0.5)

    @pytest.mark.parametrize(("probability", "expected"), [(0.0, 0), (1.0, 20)])
    def test_probability_extremes(self, probability: float, expected: int) -> None:
        assert len(random_soup(Bound(5, 4), Random(0), probability)) == expected


class TestSeedCells:
    def test_named_pattern_at_origin(self) -> None:
        config = RunConfig(width=6, height=6, pattern="blinker", origin=(2, 3))
        cells = seed_cells(config, Random(0))
        assert {c.as_tuple() for c in cells} == {(2, 3), (3, 3), (4, 3)}

    def test_random_pattern_uses_probability(self) -> None:
        config = RunConfig(width=4, height=4, pattern="random", live_probability=1.0)
        assert len(seed_cells(config, Random(0))) == 16

    def test_logs_seed_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        config = RunConfig(width=6, height=6, pattern="block")
        with caplog.at_level(logging.INFO, logger="comonad_life.patterns"):
            seed_cells(config, Random(0))
        assert "seeded 4 live cells (block) on 6x6" in caplog.text
