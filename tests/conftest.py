"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timedelta, timezone

from ta_dispatch.core.candle import Candle


def make_candles(closes, volume=1000.0, spread=2.0):
    """Build a candle series with the given closes, opening at the previous close."""
    start = datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    candles = []
    previous = closes[0]
    for i, close in enumerate(closes):
        candles.append(Candle(
            open=previous,
            high=max(previous, close) + spread / 2,
            low=min(previous, close) - spread / 2,
            close=close,
            volume=volume if not callable(volume) else volume(i),
            ts=start + timedelta(minutes=i),
        ))
        previous = close
    return candles


@pytest.fixture
def sample_candle() -> Candle:
    """Single candle for seeding."""
    return Candle(
        open=100.0,
        high=105.0,
        low=99.0,
        close=103.0,
        volume=1000.0,
        ts=datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def trending_candles() -> list[Candle]:
    """Candles falling then rising, so moving-average crosses occur."""
    return make_candles([100.0, 99.0, 98.0, 97.0, 99.0, 102.0, 104.0, 101.0, 97.0, 95.0])


@pytest.fixture
def volume_candles() -> list[Candle]:
    """Candles with a volume spike on a bullish bar and one on a bearish bar."""
    volumes = [1000.0, 1000.0, 1000.0, 3000.0, 1000.0, 1000.0, 3000.0, 1000.0]
    closes = [100.0, 101.0, 102.0, 105.0, 104.0, 103.0, 99.0, 100.0]
    return make_candles(closes, volume=lambda i: volumes[i])


@pytest.fixture
def candle_series():
    """Factory building candle series from a list of closes."""
    return make_candles
