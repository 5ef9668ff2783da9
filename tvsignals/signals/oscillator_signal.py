"""Oscillator classification rules.

Each rule follows the standard technical-analysis reading of the
indicator. Arguments suffixed ``_prev`` are the value one bar back,
``_prev2`` two bars back. Ties and any combination not listed are
NEUTRAL; NaN never matches a comparison and so is NEUTRAL too.
"""

from __future__ import annotations

from .signal_types import Signal


def classify_rsi(rsi: float, rsi_prev: float) -> Signal:
    """RSI(14): oversold and turning up is BUY, overbought and turning down is SELL."""
    if rsi < 30 and rsi_prev < rsi:
        return Signal.BUY
    if rsi > 70 and rsi_prev > rsi:
        return Signal.SELL
    return Signal.NEUTRAL


def classify_stoch(k: float, d: float, k_prev: float, d_prev: float) -> Signal:
    """Stochastic %K: %K crossing %D inside the 20/80 extremes."""
    if k < 20 and d < 20 and k > d and k_prev < d_prev:
        return Signal.BUY
    if k > 80 and d > 80 and k < d and k_prev > d_prev:
        return Signal.SELL
    return Signal.NEUTRAL


def classify_cci(cci: float, cci_prev: float) -> Signal:
    """CCI(20): beyond +/-100 and moving back toward zero."""
    if cci < -100 and cci > cci_prev:
        return Signal.BUY
    if cci > 100 and cci < cci_prev:
        return Signal.SELL
    return Signal.NEUTRAL


def classify_adx(
    adx: float,
    plus_di: float,
    minus_di: float,
    plus_di_prev: float,
    minus_di_prev: float,
) -> Signal:
    """ADX(14): +DI/-DI crossover while the trend is strong (ADX > 20)."""
    if adx > 20 and plus_di_prev < minus_di_prev and plus_di > minus_di:
        return Signal.BUY
    if adx > 20 and plus_di_prev > minus_di_prev and plus_di < minus_di:
        return Signal.SELL
    return Signal.NEUTRAL


def classify_ao(ao: float, ao_prev: float, ao_prev2: float) -> Signal:
    """Awesome Oscillator: zero-line cross or saucer."""
    if (ao > 0 and ao_prev < 0) or (
        ao > 0 and ao_prev > 0 and ao > ao_prev and ao_prev2 > ao_prev
    ):
        return Signal.BUY
    if (ao < 0 and ao_prev > 0) or (
        ao < 0 and ao_prev < 0 and ao < ao_prev and ao_prev2 < ao_prev
    ):
        return Signal.SELL
    return Signal.NEUTRAL


def classify_mom(mom: float, mom_prev: float) -> Signal:
    """Momentum(10): rising is BUY, falling is SELL."""
    if mom > mom_prev:
        return Signal.BUY
    if mom < mom_prev:
        return Signal.SELL
    return Signal.NEUTRAL


def classify_macd(macd: float, signal: float) -> Signal:
    """MACD level relative to its signal line."""
    if macd > signal:
        return Signal.BUY
    if macd < signal:
        return Signal.SELL
    return Signal.NEUTRAL
