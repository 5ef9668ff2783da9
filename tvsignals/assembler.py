"""Report assembler: symbol + interval -> fully classified Report.

Validates the symbol, resolves the interval, asks the fetch collaborator
for every field in the static table and runs each classifier on its
documented operands. Either a complete Report is returned or an error is
raised; nothing partially built escapes.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

from .data_collectors.fields import columns_for, field_name, pivot_field
from .data_collectors.protocols import FetchCollaborator
from .data_collectors.scanner_collector import ScannerCollector
from .exceptions import FetchError, InvalidSymbolError, NoDataError, TradingViewError
from .intervals import Interval
from .report import (
    MovingAverageSignals,
    MovingAverageValues,
    OscillatorSignals,
    OscillatorValues,
    PivotLevels,
    PivotValues,
    PriceValues,
    Recommendation,
    RecommendationScores,
    Report,
    Signals,
    Values,
)
from .signals import (
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

logger = logging.getLogger(__name__)

SYMBOL_SEPARATOR = ":"


def validate_symbol(symbol: str) -> str:
    """Return ``symbol`` if it is ``EXCHANGE:TICKER``, else raise InvalidSymbolError."""
    if not isinstance(symbol, str) or symbol.count(SYMBOL_SEPARATOR) != 1:
        raise InvalidSymbolError(f"symbol must be EXCHANGE:TICKER, got {symbol!r}")
    exchange, ticker = symbol.split(SYMBOL_SEPARATOR)
    if not exchange or not ticker:
        raise InvalidSymbolError(f"symbol must be EXCHANGE:TICKER, got {symbol!r}")
    return symbol


class _Readings:
    """Read raw values for one interval; missing or null fields read as 0.0."""

    def __init__(self, raw: Mapping[str, float], suffix: str) -> None:
        self._raw = raw
        self._suffix = suffix

    def __call__(self, name: str) -> float:
        value = self._raw.get(field_name(name, self._suffix))
        return 0.0 if value is None else float(value)


class ReportAssembler:
    """Build Reports using a fetch collaborator (the scanner by default)."""

    def __init__(self, collector: Optional[FetchCollaborator] = None) -> None:
        self.collector = collector if collector is not None else ScannerCollector()

    def get(self, symbol: str, interval: Union[Interval, str] = Interval.DAY_1) -> Report:
        """Fetch and classify every indicator for ``symbol`` on ``interval``.

        Unknown interval strings fall back to the daily interval.

        Raises:
            InvalidSymbolError: symbol is not EXCHANGE:TICKER.
            FetchError: the collaborator failed (ParseError / NoDataError
                for malformed or empty results).
        """
        return self._get(symbol, interval, stacklevel=4)

    def _get(self, symbol: str, interval: Union[Interval, str], stacklevel: int) -> Report:
        # stacklevel counts resolve, _get and the public wrapper before the caller
        symbol = validate_symbol(symbol)
        resolved = Interval.resolve(interval, stacklevel=stacklevel)
        columns = columns_for(resolved.suffix)

        logger.info("Fetching %d fields for %s on %s", len(columns), symbol, resolved.value)
        try:
            raw = self.collector.fetch(symbol, columns)
        except TradingViewError:
            raise
        except Exception as exc:
            raise FetchError(f"fetching {symbol} failed: {exc}") from exc

        if not raw:
            raise NoDataError(f"no data received for {symbol}")

        return assemble(symbol, resolved, raw)


def get(
    symbol: str,
    interval: Union[Interval, str] = Interval.DAY_1,
    *,
    collector: Optional[FetchCollaborator] = None,
) -> Report:
    """Module-level shortcut for ``ReportAssembler(collector).get(...)``."""
    return ReportAssembler(collector)._get(symbol, interval, stacklevel=4)


def assemble(symbol: str, interval: Interval, raw: Mapping[str, float]) -> Report:
    """Classify an already fetched field mapping into a Report."""
    v = _Readings(raw, interval.suffix)

    scores = RecommendationScores(
        summary=v("Recommend.All"),
        oscillators=v("Recommend.Other"),
        moving_averages=v("Recommend.MA"),
    )
    prices = _prices(v)
    oscillators = _oscillator_values(v)
    moving_averages = _moving_average_values(v)

    recommend = Signals(
        recommendation=Recommendation(
            summary=classify_recommend(scores.summary),
            oscillators=classify_recommend(scores.oscillators),
            moving_averages=classify_recommend(scores.moving_averages),
        ),
        oscillators=_oscillator_signals(v, oscillators),
        moving_averages=_moving_average_signals(v, moving_averages, prices.close),
    )
    value = Values(
        recommendation=scores,
        prices=prices,
        oscillators=oscillators,
        moving_averages=moving_averages,
        pivots=_pivots(v),
    )
    return Report(symbol=symbol, interval=interval, recommend=recommend, value=value)


def _prices(v: _Readings) -> PriceValues:
    return PriceValues(
        open=v("open"),
        high=v("high"),
        low=v("low"),
        close=v("close"),
        change=v("change"),
        volume=v("volume"),
        parabolic_sar=v("P.SAR"),
        bb_lower=v("BB.lower"),
        bb_upper=v("BB.upper"),
    )


def _oscillator_values(v: _Readings) -> OscillatorValues:
    return OscillatorValues(
        rsi=v("RSI"),
        rsi_prev=v("RSI[1]"),
        stoch_k=v("Stoch.K"),
        stoch_d=v("Stoch.D"),
        stoch_k_prev=v("Stoch.K[1]"),
        stoch_d_prev=v("Stoch.D[1]"),
        cci=v("CCI20"),
        cci_prev=v("CCI20[1]"),
        adx=v("ADX"),
        adx_plus_di=v("ADX+DI"),
        adx_minus_di=v("ADX-DI"),
        adx_plus_di_prev=v("ADX+DI[1]"),
        adx_minus_di_prev=v("ADX-DI[1]"),
        ao=v("AO"),
        ao_prev=v("AO[1]"),
        ao_prev2=v("AO[2]"),
        mom=v("Mom"),
        mom_prev=v("Mom[1]"),
        macd=v("MACD.macd"),
        macd_signal=v("MACD.signal"),
        stoch_rsi_k=v("Stoch.RSI.K"),
        williams_r=v("W.R"),
        bbp=v("BBPower"),
        uo=v("UO"),
    )


def _oscillator_signals(v: _Readings, o: OscillatorValues) -> OscillatorSignals:
    return OscillatorSignals(
        rsi=classify_rsi(o.rsi, o.rsi_prev),
        stoch_k=classify_stoch(o.stoch_k, o.stoch_d, o.stoch_k_prev, o.stoch_d_prev),
        cci=classify_cci(o.cci, o.cci_prev),
        adx=classify_adx(
            o.adx, o.adx_plus_di, o.adx_minus_di, o.adx_plus_di_prev, o.adx_minus_di_prev
        ),
        ao=classify_ao(o.ao, o.ao_prev, o.ao_prev2),
        mom=classify_mom(o.mom, o.mom_prev),
        macd=classify_macd(o.macd, o.macd_signal),
        # Rec.* fields arrive pre-classified by the scanner
        stoch_rsi=classify_rating(v("Rec.Stoch.RSI")),
        williams_r=classify_rating(v("Rec.WR")),
        bbp=classify_rating(v("Rec.BBPower")),
        uo=classify_rating(v("Rec.UO")),
    )


def _moving_average_values(v: _Readings) -> MovingAverageValues:
    return MovingAverageValues(
        ema5=v("EMA5"),
        sma5=v("SMA5"),
        ema10=v("EMA10"),
        sma10=v("SMA10"),
        ema20=v("EMA20"),
        sma20=v("SMA20"),
        ema30=v("EMA30"),
        sma30=v("SMA30"),
        ema50=v("EMA50"),
        sma50=v("SMA50"),
        ema100=v("EMA100"),
        sma100=v("SMA100"),
        ema200=v("EMA200"),
        sma200=v("SMA200"),
        ichimoku_bline=v("Ichimoku.BLine"),
        vwma=v("VWMA"),
        hull_ma9=v("HullMA9"),
    )


def _moving_average_signals(
    v: _Readings, m: MovingAverageValues, close: float
) -> MovingAverageSignals:
    return MovingAverageSignals(
        ema10=classify_ma(m.ema10, close),
        sma10=classify_ma(m.sma10, close),
        ema20=classify_ma(m.ema20, close),
        sma20=classify_ma(m.sma20, close),
        ema30=classify_ma(m.ema30, close),
        sma30=classify_ma(m.sma30, close),
        ema50=classify_ma(m.ema50, close),
        sma50=classify_ma(m.sma50, close),
        ema100=classify_ma(m.ema100, close),
        sma100=classify_ma(m.sma100, close),
        ema200=classify_ma(m.ema200, close),
        sma200=classify_ma(m.sma200, close),
        ichimoku=classify_rating(v("Rec.Ichimoku")),
        vwma=classify_rating(v("Rec.VWMA")),
        hull_ma=classify_rating(v("Rec.HullMA9")),
    )


def _pivot_levels(v: _Readings, method: str) -> PivotLevels:
    if method == "Demark":
        return PivotLevels(
            s1=v(pivot_field(method, "S1")),
            middle=v(pivot_field(method, "Middle")),
            r1=v(pivot_field(method, "R1")),
        )
    return PivotLevels(
        s1=v(pivot_field(method, "S1")),
        middle=v(pivot_field(method, "Middle")),
        r1=v(pivot_field(method, "R1")),
        s2=v(pivot_field(method, "S2")),
        s3=v(pivot_field(method, "S3")),
        r2=v(pivot_field(method, "R2")),
        r3=v(pivot_field(method, "R3")),
    )


def _pivots(v: _Readings) -> PivotValues:
    return PivotValues(
        classic=_pivot_levels(v, "Classic"),
        fibonacci=_pivot_levels(v, "Fibonacci"),
        camarilla=_pivot_levels(v, "Camarilla"),
        woodie=_pivot_levels(v, "Woodie"),
        demark=_pivot_levels(v, "Demark"),
    )
