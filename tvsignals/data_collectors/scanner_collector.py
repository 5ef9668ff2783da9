"""TradingView scanner collector.

Posts one scan request for a single ticker and decodes the row of
indicator values into a ``{field name: float}`` mapping.
No retries and no caching: each call is exactly one HTTP request.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import requests

from ..config import ScannerConfig
from ..exceptions import FetchError, NoDataError, ParseError

logger = logging.getLogger(__name__)


class ScannerCollector:
    """Fetch collaborator backed by the scanner's ``/<screener>/scan`` endpoint."""

    def __init__(
        self,
        config: Optional[ScannerConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config if config is not None else ScannerConfig.from_env()
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def close(self) -> None:
        """Close the HTTP session if this collector created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> ScannerCollector:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def fetch(self, symbol: str, columns: Sequence[str]) -> dict[str, float]:
        """Return the value of every requested column for ``symbol``.

        Raises:
            FetchError: network failure, timeout, or non-2xx status.
            ParseError: the body is not the expected JSON shape.
            NoDataError: the scanner returned no rows for the symbol.
        """
        payload = {
            "symbols": {"tickers": [symbol], "query": {"types": []}},
            "columns": list(columns),
        }
        url = self.config.scan_url
        logger.debug("POST %s symbol=%s columns=%d", url, symbol, len(payload["columns"]))

        try:
            resp = self.session.post(
                url,
                json=payload,
                headers={"User-Agent": self.config.user_agent},
                timeout=self.config.timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Scanner request for %s failed: %s", symbol, exc)
            raise FetchError(f"scanner request for {symbol} failed: {exc}") from exc

        try:
            body = resp.json()
        except ValueError as exc:
            raise ParseError(f"scanner response for {symbol} is not JSON") from exc

        row = _first_row(body, symbol)
        return _decode_row(row, columns, symbol)


def _first_row(body: Any, symbol: str) -> list:
    """Extract the ``d`` value list of the first result row."""
    if not isinstance(body, dict):
        raise ParseError(f"scanner response for {symbol} is not a JSON object")

    if body.get("totalCount") == 0:
        raise NoDataError(f"no data received for {symbol}")

    data = body.get("data")
    if data is None:
        raise ParseError(f"scanner response for {symbol} has no 'data' field")
    if not isinstance(data, list):
        raise ParseError(f"scanner 'data' for {symbol} is not a list")
    if not data:
        raise NoDataError(f"no data received for {symbol}")

    first = data[0]
    if not isinstance(first, dict) or not isinstance(first.get("d"), list):
        raise ParseError(f"scanner row for {symbol} has no 'd' value list")
    return first["d"]


def _decode_row(row: list, columns: Sequence[str], symbol: str) -> dict[str, float]:
    """Pair row cells with column names; null cells read as 0.0."""
    values: dict[str, float] = {}
    for name, cell in zip(columns, row):
        if cell is None:
            values[name] = 0.0
            continue
        if isinstance(cell, bool):
            raise ParseError(f"field {name} for {symbol} is not numeric: {cell!r}")
        try:
            values[name] = float(cell)
        except (TypeError, ValueError) as exc:
            raise ParseError(f"field {name} for {symbol} is not numeric: {cell!r}") from exc

    if len(row) < len(columns):
        logger.debug(
            "Scanner returned %d of %d fields for %s", len(row), len(columns), symbol
        )
    return values
