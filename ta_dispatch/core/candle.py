"""
Candle data model and price source selection.

The dispatch core treats candles as read-only records supplied by the host.
Any object exposing open/high/low/close/volume satisfies OHLCV; Candle is the
package's own immutable implementation.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class OHLCV(Protocol):
    """Read-only market data record consumed by indicators."""

    @property
    def open(self) -> float: ...

    @property
    def high(self) -> float: ...

    @property
    def low(self) -> float: ...

    @property
    def close(self) -> float: ...

    @property
    def volume(self) -> float: ...


@dataclass(frozen=True)
class Candle:
    """Immutable candlestick record."""
    open: float                        # Opening price
    high: float                        # High price
    low: float                         # Low price
    close: float                       # Closing price
    volume: float = 0.0                # Base volume
    ts: Optional[datetime] = None      # UTC market timestamp
    is_closed: bool = True             # True if bar is closed/confirmed

    @property
    def range(self) -> float:
        """High-low range of the bar."""
        return self.high - self.low


class Source(str, Enum):
    """Price source an indicator reads from each candle."""
    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    CLOSE = "close"
    VOLUME = "volume"
    HL2 = "hl2"
    HLC3 = "hlc3"
    OHLC4 = "ohlc4"

    def value_of(self, candle: OHLCV) -> float:
        """Extract this source's value from a candle."""
        if self is Source.OPEN:
            return candle.open
        if self is Source.HIGH:
            return candle.high
        if self is Source.LOW:
            return candle.low
        if self is Source.CLOSE:
            return candle.close
        if self is Source.VOLUME:
            return candle.volume
        if self is Source.HL2:
            return (candle.high + candle.low) / 2.0
        if self is Source.HLC3:
            return (candle.high + candle.low + candle.close) / 3.0
        return (candle.open + candle.high + candle.low + candle.close) / 4.0

    @classmethod
    def parse(cls, text: str) -> "Source":
        """
        Parse a source name, case-insensitively.

        Raises:
            ValueError: If the name is not a known source
        """
        try:
            return cls(text.strip().lower())
        except ValueError:
            known = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown price source '{text}' (expected one of: {known})") from None
