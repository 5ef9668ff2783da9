"""Markdown report generator for tvsignals.

Renders a Report as deterministic Markdown tables. No network access;
everything comes from the Report itself.
"""

from __future__ import annotations

from .report import MOVING_AVERAGE_ROWS, PivotLevels, Report, signal_fields
from .signals.signal_types import Signal

_PIVOT_ORDER = ("s3", "s2", "s1", "middle", "r1", "r2", "r3")


class ReportGenerator:
    """Generate a human-readable markdown report from a Report."""

    def generate(self, report: Report) -> str:
        sections = [
            self._header(report),
            self._recommendation(report),
            self._oscillators(report),
            self._moving_averages(report),
            self._pivots(report),
        ]
        return "\n\n".join(sections)

    def _header(self, report: Report) -> str:
        prices = report.value.prices
        return (
            f"# {report.symbol} Technical Analysis ({report.interval.value})\n"
            f"**Close**: {prices.close:,.4f} | "
            f"**Change**: {prices.change:+.2f}% | "
            f"**Volume**: {prices.volume:,.0f}"
        )

    def _recommendation(self, report: Report) -> str:
        signals = report.recommend.recommendation
        scores = report.value.recommendation
        lines = [
            "## Recommendation",
            "| Group | Signal | Score |",
            "|-------|--------|-------|",
        ]
        for name in signal_fields(type(signals)):
            lines.append(
                f"| {_title(name)} "
                f"| {_signal_cell(getattr(signals, name))} "
                f"| {getattr(scores, name):+.3f} |"
            )
        return "\n".join(lines)

    def _oscillators(self, report: Report) -> str:
        signals = report.recommend.oscillators
        lines = [
            "## Oscillators",
            "| Indicator | Signal |",
            "|-----------|--------|",
        ]
        for name in signal_fields(type(signals)):
            lines.append(f"| {name.upper()} | {_signal_cell(getattr(signals, name))} |")
        lines.append("")
        lines.append(_tally([getattr(signals, n) for n in signal_fields(type(signals))]))
        return "\n".join(lines)

    def _moving_averages(self, report: Report) -> str:
        signals = report.recommend.moving_averages
        values = report.value.moving_averages
        lines = [
            "## Moving Averages",
            "| Indicator | Signal | Value |",
            "|-----------|--------|-------|",
        ]
        for name, value_name, _ in MOVING_AVERAGE_ROWS:
            value = getattr(values, value_name)
            lines.append(
                f"| {name.upper()} | {_signal_cell(getattr(signals, name))} | {value:,.4f} |"
            )
        lines.append("")
        lines.append(_tally([getattr(signals, n) for n in signal_fields(type(signals))]))
        return "\n".join(lines)

    def _pivots(self, report: Report) -> str:
        pivots = report.value.pivots
        header = "| Method | " + " | ".join(p.upper() for p in _PIVOT_ORDER) + " |"
        lines = [
            "## Pivots (monthly)",
            header,
            "|" + "---|" * (len(_PIVOT_ORDER) + 1),
        ]
        for method in signal_fields(type(pivots)):
            levels: PivotLevels = getattr(pivots, method)
            cells = [
                f"{getattr(levels, p):,.4f}" if getattr(levels, p) is not None else "-"
                for p in _PIVOT_ORDER
            ]
            lines.append(f"| {_title(method)} | " + " | ".join(cells) + " |")
        return "\n".join(lines)


def _title(name: str) -> str:
    return name.replace("_", " ").title()


def _signal_cell(signal: Signal) -> str:
    return signal.label


def _tally(signals: list[Signal]) -> str:
    buy = sum(1 for s in signals if s > Signal.NEUTRAL)
    sell = sum(1 for s in signals if s < Signal.NEUTRAL)
    neutral = len(signals) - buy - sell
    return f"Buy: {buy} | Neutral: {neutral} | Sell: {sell}"
