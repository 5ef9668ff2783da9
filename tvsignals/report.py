"""Immutable analysis report for one symbol and interval.

A Report carries two parallel trees: ``recommend`` holds the classified
Signal of every indicator, ``value`` holds the raw reading behind it.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Optional

import pandas as pd

from .intervals import Interval
from .signals.signal_types import Signal


# ---------------------------------------------------------------------------
# Signals
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Recommendation:
    """Scanner-level recommendation, one Signal per aggregate."""

    summary: Signal
    oscillators: Signal
    moving_averages: Signal


@dataclass(frozen=True)
class OscillatorSignals:
    rsi: Signal
    stoch_k: Signal
    cci: Signal
    adx: Signal
    ao: Signal
    mom: Signal
    macd: Signal
    stoch_rsi: Signal
    williams_r: Signal
    bbp: Signal
    uo: Signal


@dataclass(frozen=True)
class MovingAverageSignals:
    ema10: Signal
    sma10: Signal
    ema20: Signal
    sma20: Signal
    ema30: Signal
    sma30: Signal
    ema50: Signal
    sma50: Signal
    ema100: Signal
    sma100: Signal
    ema200: Signal
    sma200: Signal
    ichimoku: Signal
    vwma: Signal
    hull_ma: Signal


@dataclass(frozen=True)
class Signals:
    recommendation: Recommendation
    oscillators: OscillatorSignals
    moving_averages: MovingAverageSignals


# ---------------------------------------------------------------------------
# Raw values
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RecommendationScores:
    """Aggregate scores in [-1, 1] as reported by the scanner."""

    summary: float
    oscillators: float
    moving_averages: float


@dataclass(frozen=True)
class OscillatorValues:
    rsi: float
    rsi_prev: float
    stoch_k: float
    stoch_d: float
    stoch_k_prev: float
    stoch_d_prev: float
    cci: float
    cci_prev: float
    adx: float
    adx_plus_di: float
    adx_minus_di: float
    adx_plus_di_prev: float
    adx_minus_di_prev: float
    ao: float
    ao_prev: float
    ao_prev2: float
    mom: float
    mom_prev: float
    macd: float
    macd_signal: float
    stoch_rsi_k: float
    williams_r: float
    bbp: float
    uo: float


@dataclass(frozen=True)
class MovingAverageValues:
    ema5: float
    sma5: float
    ema10: float
    sma10: float
    ema20: float
    sma20: float
    ema30: float
    sma30: float
    ema50: float
    sma50: float
    ema100: float
    sma100: float
    ema200: float
    sma200: float
    ichimoku_bline: float
    vwma: float
    hull_ma9: float


@dataclass(frozen=True)
class PriceValues:
    open: float
    high: float
    low: float
    close: float
    change: float
    volume: float
    parabolic_sar: float
    bb_lower: float
    bb_upper: float


@dataclass(frozen=True)
class PivotLevels:
    """Monthly pivot levels. Demark only defines S1, middle and R1."""

    s1: float
    middle: float
    r1: float
    s2: Optional[float] = None
    s3: Optional[float] = None
    r2: Optional[float] = None
    r3: Optional[float] = None


@dataclass(frozen=True)
class PivotValues:
    classic: PivotLevels
    fibonacci: PivotLevels
    camarilla: PivotLevels
    woodie: PivotLevels
    demark: PivotLevels


@dataclass(frozen=True)
class Values:
    recommendation: RecommendationScores
    prices: PriceValues
    oscillators: OscillatorValues
    moving_averages: MovingAverageValues
    pivots: PivotValues


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

# (signal attribute, value attribute, legacy key) per classified indicator
OSCILLATOR_ROWS: tuple[tuple[str, str, str], ...] = (
    ("rsi", "rsi", "RSI"),
    ("stoch_k", "stoch_k", "STOCHK"),
    ("cci", "cci", "CCI"),
    ("adx", "adx", "ADX"),
    ("ao", "ao", "AO"),
    ("mom", "mom", "Mom"),
    ("macd", "macd", "MACD"),
    ("stoch_rsi", "stoch_rsi_k", "STOCHRSI"),
    ("williams_r", "williams_r", "WR"),
    ("bbp", "bbp", "BBP"),
    ("uo", "uo", "UO"),
)

MOVING_AVERAGE_ROWS: tuple[tuple[str, str, str], ...] = (
    *((name, name, name.upper()) for name in (
        "ema10", "sma10", "ema20", "sma20", "ema30", "sma30",
        "ema50", "sma50", "ema100", "sma100", "ema200", "sma200",
    )),
    ("ichimoku", "ichimoku_bline", "Ichimoku"),
    ("vwma", "vwma", "VWMA"),
    ("hull_ma", "hull_ma9", "HullMA"),
)

RECOMMENDATION_ROWS: tuple[tuple[str, str, str], ...] = (
    ("summary", "summary", "summary"),
    ("oscillators", "oscillators", "oscillators"),
    ("moving_averages", "moving_averages", "moving_averages"),
)


@dataclass(frozen=True)
class Report:
    """Classified signals and raw values for one symbol on one interval."""

    symbol: str
    interval: Interval
    recommend: Signals
    value: Values

    def to_dict(self) -> dict:
        """Nested plain dict; signals become ints, the interval its token."""
        data = asdict(self)
        data["interval"] = self.interval.value
        return _plain(data)

    def computed(self) -> dict[str, int]:
        """Flat signal map keyed like ``recommend_summary`` or ``computed_ma_EMA10``."""
        result: dict[str, int] = {}
        for attr, _, key in RECOMMENDATION_ROWS:
            result[f"recommend_{key}"] = int(getattr(self.recommend.recommendation, attr))
        for attr, _, key in OSCILLATOR_ROWS:
            result[f"computed_oscillators_{key}"] = int(getattr(self.recommend.oscillators, attr))
        for attr, _, key in MOVING_AVERAGE_ROWS:
            result[f"computed_ma_{key}"] = int(getattr(self.recommend.moving_averages, attr))
        return result

    def to_frame(self) -> pd.DataFrame:
        """One row per classified indicator: group, indicator, signal, value."""
        groups = (
            ("recommendation", RECOMMENDATION_ROWS,
             self.recommend.recommendation, self.value.recommendation),
            ("oscillators", OSCILLATOR_ROWS,
             self.recommend.oscillators, self.value.oscillators),
            ("moving_averages", MOVING_AVERAGE_ROWS,
             self.recommend.moving_averages, self.value.moving_averages),
        )
        records = []
        for group, rows, signals, values in groups:
            for signal_attr, value_attr, _ in rows:
                signal = getattr(signals, signal_attr)
                records.append({
                    "group": group,
                    "indicator": signal_attr,
                    "signal": signal.name,
                    "value": float(getattr(values, value_attr)),
                })
        return pd.DataFrame.from_records(
            records, columns=["group", "indicator", "signal", "value"]
        )


def _plain(obj):
    if isinstance(obj, dict):
        return {k: _plain(v) for k, v in obj.items()}
    if isinstance(obj, Signal):
        return int(obj)
    return obj


def signal_fields(cls) -> tuple[str, ...]:
    """Attribute names of a signal or value dataclass, in declaration order."""
    return tuple(f.name for f in fields(cls))
