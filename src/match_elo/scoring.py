"""Pure Elo scoring math shared by every match shape."""

from __future__ import annotations

from math import floor

DEFAULT_SCALE_FACTOR = 400.0

# 10 ** x overflows a float near x = 308; past this exponent the expected score is 0.0.
MAX_EXPONENT = 300.0

# Nudge applied to member weights so two equal contributors never round the same way.
WEIGHT_ADJUSTMENT = 0.0001


def calculate_expected_score(
    rating: float,
    opponent_rating: float,
    scale_factor: float = DEFAULT_SCALE_FACTOR,
) -> float:
    """Compute the Elo expected score for one side."""
    exponent = (opponent_rating - rating) / scale_factor
    if exponent > MAX_EXPONENT:
        return 0.0
    return 1.0 / (1.0 + 10.0 ** exponent)


def actual_score(score: float, opponent_score: float) -> float:
    """Return 1.0 for a higher score, 0.5 for a tie and 0.0 for a lower score."""
    if score > opponent_score:
        return 1.0
    if score == opponent_score:
        return 0.5
    return 0.0


def pairwise_delta(k_factor: float, actual: float, expected: float) -> float:
    return k_factor * (actual - expected)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always going towards positive infinity."""
    return int(floor(value + 0.5))


def signed_round(raw_delta: float) -> int:
    """Round the magnitude of a delta while keeping its sign.

    A small loss therefore never rounds into a gain, and a small gain never
    rounds into a loss; both may round to zero.
    """
    if raw_delta == 0.0:
        return 0
    magnitude = round_half_up(abs(raw_delta))
    return magnitude if raw_delta > 0.0 else -magnitude


def adjusted_weight(rating: float, total_rating: float, member_count: int) -> float:
    """Return a member's share of the team rating, nudged away from an exact 0.5 split.

    A zero team total falls back to an equal split without the nudge.
    """
    if total_rating == 0.0:
        return 1.0 / member_count

    weight = rating / total_rating
    if weight > 0.5:
        return weight + WEIGHT_ADJUSTMENT
    return weight - WEIGHT_ADJUSTMENT


__all__ = [
    "DEFAULT_SCALE_FACTOR",
    "MAX_EXPONENT",
    "WEIGHT_ADJUSTMENT",
    "actual_score",
    "adjusted_weight",
    "calculate_expected_score",
    "pairwise_delta",
    "round_half_up",
    "signed_round",
]
