"""Tests for scanner configuration."""

from __future__ import annotations

import dataclasses

import pytest

from tvsignals.config import ScannerConfig
from tvsignals.exceptions import ConfigurationError


class TestScannerConfig:
    def test_defaults(self) -> None:
        cfg = ScannerConfig()
        assert cfg.screener == "crypto"
        assert cfg.timeout == 10.0
        assert cfg.scan_url == "https://scanner.tradingview.com/crypto/scan"

    def test_frozen(self) -> None:
        cfg = ScannerConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.screener = "america"  # type: ignore[misc]

    def test_trailing_slash_in_base_url(self) -> None:
        cfg = ScannerConfig(base_url="http://localhost:8080/", screener="forex")
        assert cfg.scan_url == "http://localhost:8080/forex/scan"


class TestFromEnv:
    def test_empty_environment_uses_defaults(self) -> None:
        assert ScannerConfig.from_env({}) == ScannerConfig()

    def test_overrides(self) -> None:
        cfg = ScannerConfig.from_env({
            "TVSIGNALS_BASE_URL": "http://scanner.local",
            "TVSIGNALS_SCREENER": "america",
            "TVSIGNALS_TIMEOUT": "2.5",
            "TVSIGNALS_USER_AGENT": "probe/1.0",
        })
        assert cfg.scan_url == "http://scanner.local/america/scan"
        assert cfg.timeout == 2.5
        assert cfg.user_agent == "probe/1.0"

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TVSIGNALS_SCREENER", "forex")
        assert ScannerConfig.from_env().screener == "forex"

    @pytest.mark.parametrize("value", ["abc", "0", "-3"])
    def test_invalid_timeout(self, value: str) -> None:
        with pytest.raises(ConfigurationError, match="TVSIGNALS_TIMEOUT"):
            ScannerConfig.from_env({"TVSIGNALS_TIMEOUT": value})
