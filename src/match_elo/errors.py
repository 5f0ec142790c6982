"""Exception types raised by rating calculations."""

from __future__ import annotations


class MatchValidationError(ValueError):
    """Caller-fixable problem with match input (identifiers, ratings, scores, options)."""


class RatingInvariantError(RuntimeError):
    """Internal consistency failure that valid input can never trigger."""


__all__ = ["MatchValidationError", "RatingInvariantError"]
