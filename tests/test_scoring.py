"""Unit tests for outcome comparison, rounding and member weights."""

from __future__ import annotations

import pytest

from match_elo.scoring import (
    WEIGHT_ADJUSTMENT,
    actual_score,
    adjusted_weight,
    pairwise_delta,
    round_half_up,
    signed_round,
)


def test_actual_score_higher_score_wins() -> None:
    assert actual_score(3.0, 1.0) == 1.0
    assert actual_score(1.0, 3.0) == 0.0
    assert actual_score(2.0, 2.0) == 0.5


def test_pairwise_delta_scales_by_k_factor() -> None:
    assert pairwise_delta(15.0, 1.0, 0.5) == pytest.approx(7.5)
    assert pairwise_delta(32.0, 0.0, 0.25) == pytest.approx(-8.0)


def test_round_half_up_rounds_halves_towards_positive_infinity() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(7.5) == 8
    assert round_half_up(-2.5) == -2
    assert round_half_up(-13.5676) == -14
    assert round_half_up(0.49) == 0


def test_signed_round_never_flips_sign() -> None:
    assert signed_round(0.0) == 0
    assert signed_round(0.4) == 0
    assert signed_round(-0.4) == 0
    assert signed_round(2.5) == 3
    assert signed_round(-2.5) == -3
    assert signed_round(-7.52) == -8
    assert signed_round(11.775) == 12


def test_signed_round_is_antisymmetric() -> None:
    for raw in (0.5, 1.49, 3.5, 10.01, 37.5):
        assert signed_round(-raw) == -signed_round(raw)


def test_adjusted_weight_nudges_away_from_half() -> None:
    assert adjusted_weight(1150.0, 1850.0, 2) == pytest.approx(1150.0 / 1850.0 + WEIGHT_ADJUSTMENT)
    assert adjusted_weight(700.0, 1850.0, 2) == pytest.approx(700.0 / 1850.0 - WEIGHT_ADJUSTMENT)
    assert adjusted_weight(1200.0, 2400.0, 2) == pytest.approx(0.5 - WEIGHT_ADJUSTMENT)


def test_adjusted_weight_zero_total_falls_back_to_equal_split() -> None:
    assert adjusted_weight(0.0, 0.0, 2) == 0.5
    assert adjusted_weight(0.0, 0.0, 4) == 0.25
