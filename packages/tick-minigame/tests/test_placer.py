"""Tests for best-effort rejection-sampling placement."""
from __future__ import annotations

import itertools
import math
import random

import pytest

from tick_minigame import ConfigError, Pos2D, SpawnRect, place_items
from tick_minigame.placer import too_close

BOUNDS = SpawnRect(-8.0, -4.5, 8.0, 4.5)


def _min_pairwise(points: list[Pos2D]) -> float:
    return min(
        math.sqrt(a.dist_sq(b)) for a, b in itertools.combinations(points, 2)
    )


class TestTooClose:
    def test_empty_list(self) -> None:
        assert too_close(Pos2D(0, 0), [], 1.0) is False

    def test_exact_separation_is_allowed(self) -> None:
        assert too_close(Pos2D(0, 0), [Pos2D(3, 4)], 5.0) is False

    def test_closer_than_separation(self) -> None:
        assert too_close(Pos2D(0, 0), [Pos2D(3, 4)], 5.01) is True


class TestPlaceItems:
    def test_places_requested_count_inside_bounds(self) -> None:
        result = place_items(25, BOUNDS, 0.6, 40, random.Random(1))
        assert len(result) == 25
        for placement in result:
            assert BOUNDS.contains(placement.position)
            assert 1 <= placement.attempts <= 40

    def test_zero_items(self) -> None:
        assert place_items(0, BOUNDS, 0.6, 40, random.Random(1)) == []

    def test_sparse_layout_respects_separation(self) -> None:
        result = place_items(10, SpawnRect(0, 0, 100, 100), 5.0, 200, random.Random(7))
        assert not any(p.relaxed for p in result)
        assert _min_pairwise([p.position for p in result]) >= 5.0

    def test_unrelaxed_placements_respect_separation(self) -> None:
        result = place_items(40, BOUNDS, 1.5, 10, random.Random(11))
        accepted: list[Pos2D] = []
        for placement in result:
            if not placement.relaxed:
                assert not too_close(placement.position, accepted, 1.5)
            accepted.append(placement.position)

    def test_dense_layout_completes_best_effort(self) -> None:
        # A 1x1 box cannot hold 30 points that are 2 apart.
        tiny = SpawnRect(0, 0, 1, 1)
        result = place_items(30, tiny, 2.0, 5, random.Random(3))
        assert len(result) == 30
        assert result[0].relaxed is False
        assert all(p.relaxed for p in result[1:])
        assert all(p.attempts == 5 for p in result[1:])
        assert all(tiny.contains(p.position) for p in result)

    def test_single_attempt_accepts_first_sample(self) -> None:
        result = place_items(20, SpawnRect(0, 0, 1, 1), 10.0, 1, random.Random(2))
        assert [p.attempts for p in result] == [1] * 20

    def test_zero_separation_never_relaxes(self) -> None:
        result = place_items(50, SpawnRect(0, 0, 1, 1), 0.0, 1, random.Random(2))
        assert not any(p.relaxed for p in result)

    def test_deterministic_for_seed(self) -> None:
        a = place_items(15, BOUNDS, 0.6, 40, random.Random(99))
        b = place_items(15, BOUNDS, 0.6, 40, random.Random(99))
        assert a == b

    @pytest.mark.parametrize(
        "bounds",
        [
            SpawnRect(0, 0, 0, 10),
            SpawnRect(0, 0, 10, 0),
            SpawnRect(5, 5, 1, 1),
            SpawnRect(0, 0, math.nan, 10),
            SpawnRect(0, math.nan, 10, 10),
            SpawnRect(0, 0, math.inf, 10),
        ],
    )
    def test_degenerate_bounds_raise(self, bounds: SpawnRect) -> None:
        with pytest.raises(ConfigError, match="no area"):
            place_items(3, bounds, 0.5, 10, random.Random(1))

    def test_non_positive_attempts_raise(self) -> None:
        with pytest.raises(ConfigError, match="max_attempts"):
            place_items(3, BOUNDS, 0.5, 0, random.Random(1))

    def test_config_error_consumes_no_randomness(self) -> None:
        rng = random.Random(5)
        before = rng.getstate()
        with pytest.raises(ConfigError):
            place_items(3, SpawnRect(0, 0, 0, 0), 0.5, 10, rng)
        assert rng.getstate() == before
