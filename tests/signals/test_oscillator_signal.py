"""Tests for the oscillator classification rules."""

from __future__ import annotations

import math

import pytest

from tvsignals.signals import (
    Signal,
    classify_adx,
    classify_ao,
    classify_cci,
    classify_macd,
    classify_mom,
    classify_rsi,
    classify_stoch,
)

NAN = math.nan


class TestClassifyRsi:
    def test_oversold_turning_up_is_buy(self) -> None:
        assert classify_rsi(29, 28) is Signal.BUY

    def test_overbought_turning_down_is_sell(self) -> None:
        assert classify_rsi(71, 72) is Signal.SELL

    def test_mid_range_is_neutral(self) -> None:
        assert classify_rsi(50, 50) is Signal.NEUTRAL

    def test_oversold_still_falling_is_neutral(self) -> None:
        assert classify_rsi(25, 27) is Signal.NEUTRAL

    def test_threshold_is_exclusive(self) -> None:
        assert classify_rsi(30, 20) is Signal.NEUTRAL
        assert classify_rsi(70, 80) is Signal.NEUTRAL

    def test_flat_below_thirty_is_neutral(self) -> None:
        assert classify_rsi(25, 25) is Signal.NEUTRAL

    def test_nan_is_neutral(self) -> None:
        assert classify_rsi(NAN, 28) is Signal.NEUTRAL


class TestClassifyStoch:
    def test_bullish_cross_below_twenty(self) -> None:
        assert classify_stoch(19, 18, 17, 18) is Signal.BUY

    def test_bearish_cross_above_eighty(self) -> None:
        assert classify_stoch(81, 82, 83, 82) is Signal.SELL

    def test_mid_range_is_neutral(self) -> None:
        assert classify_stoch(50, 50, 50, 50) is Signal.NEUTRAL

    def test_no_prior_cross_is_neutral(self) -> None:
        # %K was already above %D on the previous bar
        assert classify_stoch(19, 18, 19, 18) is Signal.NEUTRAL

    def test_d_outside_zone_is_neutral(self) -> None:
        assert classify_stoch(19, 21, 17, 18) is Signal.NEUTRAL

    def test_equal_lines_are_neutral(self) -> None:
        assert classify_stoch(15, 15, 14, 16) is Signal.NEUTRAL


class TestClassifyCci:
    def test_below_minus_hundred_rising_is_buy(self) -> None:
        assert classify_cci(-101, -102) is Signal.BUY

    def test_above_hundred_falling_is_sell(self) -> None:
        assert classify_cci(101, 102) is Signal.SELL

    def test_zero_is_neutral(self) -> None:
        assert classify_cci(0, 0) is Signal.NEUTRAL

    def test_exactly_minus_hundred_is_neutral(self) -> None:
        assert classify_cci(-100, -150) is Signal.NEUTRAL

    def test_below_minus_hundred_falling_is_neutral(self) -> None:
        assert classify_cci(-120, -110) is Signal.NEUTRAL


class TestClassifyAdx:
    def test_plus_di_crosses_above(self) -> None:
        assert classify_adx(25, 30, 20, 18, 22) is Signal.BUY

    def test_plus_di_crosses_below(self) -> None:
        assert classify_adx(25, 20, 30, 22, 18) is Signal.SELL

    def test_weak_trend_is_neutral(self) -> None:
        assert classify_adx(20, 30, 20, 18, 22) is Signal.NEUTRAL

    def test_no_cross_is_neutral(self) -> None:
        assert classify_adx(25, 30, 20, 28, 22) is Signal.NEUTRAL

    def test_uses_lagged_minus_di_not_current(self) -> None:
        # +DI was already above -DI on the previous bar (18 > 17): no cross
        assert classify_adx(25, 30, 20, 18, 17) is Signal.NEUTRAL


class TestClassifyAo:
    def test_zero_line_cross_up(self) -> None:
        assert classify_ao(1.0, -1.0, -2.0) is Signal.BUY

    def test_saucer_above_zero(self) -> None:
        assert classify_ao(3.0, 2.0, 2.5) is Signal.BUY

    def test_zero_line_cross_down(self) -> None:
        assert classify_ao(-1.0, 1.0, 2.0) is Signal.SELL

    def test_saucer_below_zero(self) -> None:
        assert classify_ao(-3.0, -2.0, -2.5) is Signal.SELL

    def test_rising_without_saucer_is_neutral(self) -> None:
        assert classify_ao(3.0, 2.0, 1.0) is Signal.NEUTRAL

    def test_zero_is_neutral(self) -> None:
        assert classify_ao(0.0, 0.0, 0.0) is Signal.NEUTRAL


class TestClassifyMom:
    def test_rising(self) -> None:
        assert classify_mom(5, 4) is Signal.BUY

    def test_falling(self) -> None:
        assert classify_mom(4, 5) is Signal.SELL

    def test_flat(self) -> None:
        assert classify_mom(4, 4) is Signal.NEUTRAL


class TestClassifyMacd:
    def test_above_signal(self) -> None:
        assert classify_macd(1.5, 1.0) is Signal.BUY

    def test_below_signal(self) -> None:
        assert classify_macd(-1.5, -1.0) is Signal.SELL

    def test_equal(self) -> None:
        assert classify_macd(0.2, 0.2) is Signal.NEUTRAL

    @pytest.mark.parametrize(("macd", "signal"), [(NAN, 1.0), (1.0, NAN)])
    def test_nan_is_neutral(self, macd: float, signal: float) -> None:
        assert classify_macd(macd, signal) is Signal.NEUTRAL
