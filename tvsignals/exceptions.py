"""Exception hierarchy for tvsignals."""


class TradingViewError(Exception):
    """Base exception for all tvsignals errors."""


class ConfigurationError(TradingViewError):
    """Invalid scanner configuration (bad environment value)."""


class InvalidSymbolError(TradingViewError, ValueError):
    """Symbol is not of the form EXCHANGE:TICKER."""


class FetchError(TradingViewError):
    """Transport failure: network error, timeout, or non-2xx response."""


class ParseError(FetchError):
    """The scanner answered, but the payload could not be decoded."""


class NoDataError(FetchError):
    """Well-formed response with an empty result set."""
