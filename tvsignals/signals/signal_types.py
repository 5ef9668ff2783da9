"""Five-level ordinal signal shared by every classifier."""

from enum import IntEnum


class Signal(IntEnum):
    """Discrete trading signal, ordered from STRONG_SELL to STRONG_BUY."""

    STRONG_SELL = -2
    SELL = -1
    NEUTRAL = 0
    BUY = 1
    STRONG_BUY = 2

    @property
    def label(self) -> str:
        """Human-readable label, e.g. "STRONG BUY"."""
        return self.name.replace("_", " ")
