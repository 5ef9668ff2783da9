"""tvsignals: TradingView scanner indicators classified into trading signals."""

from .assembler import ReportAssembler, assemble, get, validate_symbol
from .config import ScannerConfig
from .data_collectors import FetchCollaborator, ScannerCollector
from .exceptions import (
    ConfigurationError,
    FetchError,
    InvalidSymbolError,
    NoDataError,
    ParseError,
    TradingViewError,
)
from .intervals import DEPRECATED_INTERVAL_ALIASES, Interval
from .report import Report
from .signals import (
    Signal,
    classify_adx,
    classify_ao,
    classify_cci,
    classify_ma,
    classify_macd,
    classify_mom,
    classify_rating,
    classify_recommend,
    classify_rsi,
    classify_stoch,
)

__version__ = "0.1.0"

__all__ = [
    "DEPRECATED_INTERVAL_ALIASES",
    "ConfigurationError",
    "FetchCollaborator",
    "FetchError",
    "Interval",
    "InvalidSymbolError",
    "NoDataError",
    "ParseError",
    "Report",
    "ReportAssembler",
    "ScannerCollector",
    "ScannerConfig",
    "Signal",
    "TradingViewError",
    "assemble",
    "classify_adx",
    "classify_ao",
    "classify_cci",
    "classify_ma",
    "classify_macd",
    "classify_mom",
    "classify_rating",
    "classify_recommend",
    "classify_rsi",
    "classify_stoch",
    "get",
    "validate_symbol",
]
