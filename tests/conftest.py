"""Shared test fixtures for the tvsignals test suite."""

from __future__ import annotations

from typing import Callable, Mapping, Optional, Sequence

import pytest

from tvsignals.data_collectors.fields import ALL_FIELDS, field_name


class RecordingCollector:
    """In-memory fetch collaborator that remembers what it was asked for."""

    def __init__(
        self,
        values: Optional[Mapping[str, float]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.values = dict(values or {})
        self.error = error
        self.calls: list[tuple[str, tuple[str, ...]]] = []

    def fetch(self, symbol: str, columns: Sequence[str]) -> Mapping[str, float]:
        self.calls.append((symbol, tuple(columns)))
        if self.error is not None:
            raise self.error
        return self.values


def neutral_readings(
    suffix: str = "", overrides: Optional[Mapping[str, float]] = None
) -> dict[str, float]:
    """A full field mapping where every classifier resolves to NEUTRAL.

    ``overrides`` are keyed by bare field name (no interval suffix).
    """
    raw = {field_name(name, suffix): 0.0 for name in ALL_FIELDS}
    for name in ALL_FIELDS:
        if name.startswith(("EMA", "SMA")):
            raw[field_name(name, suffix)] = 100.0
    for name in ("close", "RSI", "RSI[1]", "Stoch.K", "Stoch.D", "Stoch.K[1]", "Stoch.D[1]"):
        raw[field_name(name, suffix)] = 100.0 if name == "close" else 50.0
    for name, value in (overrides or {}).items():
        raw[field_name(name, suffix)] = value
    return raw


@pytest.fixture()
def make_raw() -> Callable[..., dict[str, float]]:
    return neutral_readings


@pytest.fixture()
def make_collector() -> Callable[..., RecordingCollector]:
    return RecordingCollector


@pytest.fixture()
def collector() -> RecordingCollector:
    return RecordingCollector(neutral_readings())
