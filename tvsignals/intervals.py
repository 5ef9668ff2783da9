"""Chart intervals and the scanner suffix token each one maps to."""

from __future__ import annotations

import logging
import warnings
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

logger = logging.getLogger(__name__)


class Interval(str, Enum):
    """Charting timeframe supported by the scanner."""

    MIN_1 = "1m"
    MIN_5 = "5m"
    MIN_15 = "15m"
    MIN_30 = "30m"
    HOUR_1 = "1h"
    HOUR_2 = "2h"
    HOUR_4 = "4h"
    DAY_1 = "1d"
    WEEK_1 = "1w"
    MONTH_1 = "1mo"

    @property
    def suffix(self) -> str:
        """Token appended to every field name ("" for the daily interval)."""
        return _SUFFIXES[self]

    @classmethod
    def resolve(cls, value: Union[Interval, str, None], stacklevel: int = 2) -> Interval:
        """Map a canonical token, a deprecated alias, or a member to an Interval.

        Unknown values fall back to the daily interval without raising.
        ``stacklevel`` is forwarded to the alias DeprecationWarning so
        wrappers can attribute it to their own caller.
        """
        if isinstance(value, Interval):
            return value
        if value in _BY_VALUE:
            return _BY_VALUE[value]
        if value in DEPRECATED_INTERVAL_ALIASES:
            canonical = DEPRECATED_INTERVAL_ALIASES[value]
            warnings.warn(
                f"Interval alias {value!r} is deprecated, use {canonical.value!r}",
                DeprecationWarning,
                stacklevel=stacklevel,
            )
            return canonical
        logger.debug("Unknown interval %r, falling back to %s", value, cls.DAY_1.value)
        return cls.DAY_1


_SUFFIXES: Mapping[Interval, str] = MappingProxyType({
    Interval.MIN_1: "1",
    Interval.MIN_5: "5",
    Interval.MIN_15: "15",
    Interval.MIN_30: "30",
    Interval.HOUR_1: "60",
    Interval.HOUR_2: "120",
    Interval.HOUR_4: "240",
    Interval.DAY_1: "",
    Interval.WEEK_1: "1W",
    Interval.MONTH_1: "1M",
})

_BY_VALUE: Mapping[str, Interval] = MappingProxyType({m.value: m for m in Interval})

# Tokens accepted by earlier releases
DEPRECATED_INTERVAL_ALIASES: Mapping[str, Interval] = MappingProxyType({
    "1min": Interval.MIN_1,
    "5min": Interval.MIN_5,
    "15min": Interval.MIN_15,
    "30min": Interval.MIN_30,
    "1hour": Interval.HOUR_1,
    "2hour": Interval.HOUR_2,
    "4hour": Interval.HOUR_4,
    "1day": Interval.DAY_1,
    "1week": Interval.WEEK_1,
    "1month": Interval.MONTH_1,
})
