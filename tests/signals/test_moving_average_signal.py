"""Tests for moving average vs close classification."""

from __future__ import annotations

import math

from tvsignals.signals import Signal, classify_ma


class TestClassifyMa:
    def test_close_above_average_is_buy(self) -> None:
        assert classify_ma(100, 101) is Signal.BUY

    def test_close_below_average_is_sell(self) -> None:
        assert classify_ma(101, 100) is Signal.SELL

    def test_equal_is_neutral(self) -> None:
        assert classify_ma(100, 100) is Signal.NEUTRAL

    def test_nan_is_neutral(self) -> None:
        assert classify_ma(math.nan, 100) is Signal.NEUTRAL
        assert classify_ma(100, math.nan) is Signal.NEUTRAL
