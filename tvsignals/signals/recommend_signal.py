"""Signals derived from scores the scanner has already aggregated."""

from __future__ import annotations

from .signal_types import Signal


def classify_recommend(value: float) -> Signal:
    """Map a recommendation score in [-1, 1] to a Signal.

    Scores outside [-1, 1] (and NaN) are NEUTRAL.
    """
    if -1 <= value < -0.5:
        return Signal.STRONG_SELL
    if -0.5 <= value < -0.1:
        return Signal.SELL
    if -0.1 <= value <= 0.1:
        return Signal.NEUTRAL
    if 0.1 < value <= 0.5:
        return Signal.BUY
    if 0.5 < value <= 1:
        return Signal.STRONG_BUY
    return Signal.NEUTRAL


def classify_rating(value: float) -> Signal:
    """Map a pre-classified ``Rec.*`` field (-1, 0 or 1) to a Signal."""
    if value == 1:
        return Signal.BUY
    if value == -1:
        return Signal.SELL
    return Signal.NEUTRAL
