"""Moving-average classification against the closing price."""

from __future__ import annotations

from .signal_types import Signal


def classify_ma(ma: float, close: float) -> Signal:
    """Price above the average is BUY, below is SELL."""
    if ma < close:
        return Signal.BUY
    if ma > close:
        return Signal.SELL
    return Signal.NEUTRAL
