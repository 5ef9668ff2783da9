"""Static table of scanner field names, grouped by indicator family.

A field is requested as ``"<name>|<suffix>"`` for intraday, weekly and
monthly intervals, and as the bare ``"<name>"`` for the daily interval.
"""

from __future__ import annotations

from functools import lru_cache
from itertools import chain
from types import MappingProxyType
from typing import Mapping

RECOMMENDATION_FIELDS: tuple[str, ...] = (
    "Recommend.All",
    "Recommend.Other",
    "Recommend.MA",
)

OSCILLATOR_FIELDS: tuple[str, ...] = (
    "RSI", "RSI[1]",
    "Stoch.K", "Stoch.D", "Stoch.K[1]", "Stoch.D[1]",
    "CCI20", "CCI20[1]",
    "ADX", "ADX+DI", "ADX-DI", "ADX+DI[1]", "ADX-DI[1]",
    "AO", "AO[1]", "AO[2]",
    "Mom", "Mom[1]",
    "MACD.macd", "MACD.signal",
    "Rec.Stoch.RSI", "Stoch.RSI.K",
    "Rec.WR", "W.R",
    "Rec.BBPower", "BBPower",
    "Rec.UO", "UO",
)

# Periods compared against the close; 5 is fetched for reference only
MA_PERIODS: tuple[int, ...] = (10, 20, 30, 50, 100, 200)

MOVING_AVERAGE_FIELDS: tuple[str, ...] = (
    "EMA5", "SMA5",
    *chain.from_iterable((f"EMA{p}", f"SMA{p}") for p in MA_PERIODS),
    "Rec.Ichimoku", "Ichimoku.BLine",
    "Rec.VWMA", "VWMA",
    "Rec.HullMA9", "HullMA9",
)

PRICE_FIELDS: tuple[str, ...] = (
    "open", "high", "low", "close", "change", "volume",
    "P.SAR", "BB.lower", "BB.upper",
)

PIVOT_LEVELS: tuple[str, ...] = ("S3", "S2", "S1", "Middle", "R1", "R2", "R3")
DEMARK_LEVELS: tuple[str, ...] = ("S1", "Middle", "R1")
PIVOT_METHODS: tuple[str, ...] = ("Classic", "Fibonacci", "Camarilla", "Woodie", "Demark")


def pivot_field(method: str, level: str) -> str:
    return f"Pivot.M.{method}.{level}"


PIVOT_FIELDS: tuple[str, ...] = tuple(
    pivot_field(method, level)
    for method in PIVOT_METHODS
    for level in (DEMARK_LEVELS if method == "Demark" else PIVOT_LEVELS)
)

FIELD_GROUPS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "recommendation": RECOMMENDATION_FIELDS,
    "oscillators": OSCILLATOR_FIELDS,
    "moving_averages": MOVING_AVERAGE_FIELDS,
    "prices": PRICE_FIELDS,
    "pivots": PIVOT_FIELDS,
})

ALL_FIELDS: tuple[str, ...] = tuple(chain.from_iterable(FIELD_GROUPS.values()))


def field_name(name: str, suffix: str) -> str:
    """Return the scanner lookup key for ``name`` on the interval ``suffix``."""
    return f"{name}|{suffix}" if suffix else name


@lru_cache(maxsize=None)
def columns_for(suffix: str) -> tuple[str, ...]:
    """All field names to request for one interval, built once per suffix."""
    return tuple(field_name(name, suffix) for name in ALL_FIELDS)
