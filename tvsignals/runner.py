"""Runner entry point for tvsignals.

Usage:
    python -m tvsignals.runner BINANCE:BTCUSDT
    python -m tvsignals.runner BINANCE:BTCUSDT BINANCE:ETHUSDT -i 1h -f table
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from .assembler import ReportAssembler
from .exceptions import TradingViewError
from .intervals import Interval
from .report import Report
from .report_generator import ReportGenerator

logger = logging.getLogger(__name__)

_FORMATS = ("markdown", "table", "json")


def render(report: Report, fmt: str) -> str:
    """Render a Report in one of the supported output formats."""
    if fmt == "json":
        return json.dumps(report.to_dict(), indent=2)
    if fmt == "table":
        return report.to_frame().to_string(index=False)
    return ReportGenerator().generate(report)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Classify TradingView technical indicators into buy/sell signals"
    )
    parser.add_argument(
        "symbols",
        nargs="+",
        help="One or more EXCHANGE:TICKER symbols (e.g. BINANCE:BTCUSDT)",
    )
    parser.add_argument(
        "-i", "--interval",
        default=Interval.DAY_1.value,
        help="Chart interval: " + ", ".join(i.value for i in Interval) + " (default: 1d)",
    )
    parser.add_argument(
        "-f", "--format",
        choices=_FORMATS,
        default="markdown",
        help="Output format (default: markdown)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        assembler = ReportAssembler()
    except TradingViewError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    status = 0
    try:
        for symbol in args.symbols:
            try:
                report = assembler.get(symbol.upper(), args.interval)
            except TradingViewError as exc:
                logger.error("%s: %s", symbol, exc)
                status = 1
                continue
            sys.stdout.write(render(report, args.format))
            sys.stdout.write("\n\n" + "=" * 72 + "\n\n")
    finally:
        close = getattr(assembler.collector, "close", None)
        if close is not None:
            close()
    return status


if __name__ == "__main__":
    sys.exit(main())
