"""Pure classifiers mapping raw indicator readings to a Signal."""

from .signal_types import Signal
from .recommend_signal import classify_rating, classify_recommend
from .oscillator_signal import (
    classify_adx,
    classify_ao,
    classify_cci,
    classify_macd,
    classify_mom,
    classify_rsi,
    classify_stoch,
)
from .moving_average_signal import classify_ma

__all__ = [
    "Signal",
    "classify_recommend",
    "classify_rating",
    "classify_rsi",
    "classify_stoch",
    "classify_cci",
    "classify_adx",
    "classify_ao",
    "classify_mom",
    "classify_macd",
    "classify_ma",
]
