"""Scanner endpoint configuration.

Defaults target the public TradingView crypto screener. Every setting can
be overridden through a ``TVSIGNALS_*`` environment variable.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_DEFAULT_BASE_URL = "https://scanner.tradingview.com"
_DEFAULT_SCREENER = "crypto"
_DEFAULT_TIMEOUT = 10.0
_DEFAULT_USER_AGENT = "tvsignals/0.1"


@dataclass(frozen=True)
class ScannerConfig:
    """Connection settings for the scanner endpoint.

    Attributes:
        base_url: Scheme and host of the scanner service.
        screener: Market segment in the endpoint path ("crypto", "america", ...).
        timeout: Request timeout in seconds.
        user_agent: Value of the User-Agent header.
    """

    base_url: str = _DEFAULT_BASE_URL
    screener: str = _DEFAULT_SCREENER
    timeout: float = _DEFAULT_TIMEOUT
    user_agent: str = _DEFAULT_USER_AGENT

    @property
    def scan_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.screener}/scan"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ScannerConfig:
        """Build a config from ``TVSIGNALS_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ

        timeout = _DEFAULT_TIMEOUT
        raw_timeout = env.get("TVSIGNALS_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigurationError(
                    f"TVSIGNALS_TIMEOUT must be a number, got {raw_timeout!r}"
                ) from exc
            if timeout <= 0:
                raise ConfigurationError(
                    f"TVSIGNALS_TIMEOUT must be positive, got {raw_timeout!r}"
                )

        config = cls(
            base_url=env.get("TVSIGNALS_BASE_URL") or _DEFAULT_BASE_URL,
            screener=env.get("TVSIGNALS_SCREENER") or _DEFAULT_SCREENER,
            timeout=timeout,
            user_agent=env.get("TVSIGNALS_USER_AGENT") or _DEFAULT_USER_AGENT,
        )
        logger.debug("Scanner config: url=%s timeout=%.1fs", config.scan_url, config.timeout)
        return config
