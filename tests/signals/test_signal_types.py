"""Tests for the Signal enumeration."""

from __future__ import annotations

from tvsignals.signals import Signal


class TestSignal:
    def test_members(self) -> None:
        assert [int(s) for s in Signal] == [-2, -1, 0, 1, 2]

    def test_total_order(self) -> None:
        assert Signal.STRONG_SELL < Signal.SELL < Signal.NEUTRAL < Signal.BUY < Signal.STRONG_BUY

    def test_label(self) -> None:
        assert Signal.STRONG_BUY.label == "STRONG BUY"
        assert Signal.NEUTRAL.label == "NEUTRAL"

    def test_lookup_by_value(self) -> None:
        assert Signal(-2) is Signal.STRONG_SELL
