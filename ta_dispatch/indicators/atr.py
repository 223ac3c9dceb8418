"""ATR (Average True Range) and NATR (Normalized ATR) indicator"""

import math
from collections import deque
from dataclasses import dataclass
from typing import Optional

from ..config.defaults import get_default_config
from ..core.candle import OHLCV
from ..core.config import IndicatorConfig, is_period, parameter_map, period_parameter
from ..core.instance import IndicatorInstance
from ..core.result import IndicatorResult
from ..errors import IncompatibleSeedError
from .registry import register_indicator

_DEFAULTS = get_default_config().atr


def calculate_true_range(current: OHLCV, previous: Optional[OHLCV] = None) -> float:
    """
    Calculate True Range for a single candle

    TR = max(high - low, abs(high - prev_close), abs(low - prev_close))

    Args:
        current: Current candle
        previous: Previous candle (None for first candle)

    Returns:
        True Range value
    """
    if previous is None:
        # First candle case - use high-low range
        return current.high - current.low

    range_hl = current.high - current.low
    range_hc = abs(current.high - previous.close)
    range_lc = abs(current.low - previous.close)

    return max(range_hl, range_hc, range_lc)


def calculate_natr(atr: float, current_price: float) -> float:
    """
    Calculate Normalized Average True Range

    NATR = 100 * ATR / current_price

    Args:
        atr: ATR value
        current_price: Current close price

    Returns:
        NATR percentage value, NaN for a non-positive price
    """
    if current_price <= 0:
        return math.nan

    return 100.0 * atr / current_price


@register_indicator
@dataclass
class AverageTrueRange(IndicatorConfig):
    """ATR over a simple moving window of true ranges."""
    period: int = _DEFAULTS.period

    NAME = "atr"
    PARAMETERS = parameter_map(
        period_parameter(description="ATR period"),
    )

    def validate(self) -> bool:
        return is_period(self.period)

    def size(self) -> tuple[int, int]:
        return 2, 0

    def instantiate(self, seed: OHLCV) -> "AverageTrueRangeInstance":
        if not (math.isfinite(seed.high) and math.isfinite(seed.low)) or seed.high < seed.low:
            raise IncompatibleSeedError(
                f"Seed candle range is invalid (high={seed.high}, low={seed.low})",
                indicator=self.NAME,
                seed=seed,
            )
        return AverageTrueRangeInstance(self, seed)


class AverageTrueRangeInstance(IndicatorInstance[AverageTrueRange]):
    """True-range window pre-filled with the seed candle's range."""

    def __init__(self, config: AverageTrueRange, seed: OHLCV):
        super().__init__(config)
        self._true_ranges = deque(
            [calculate_true_range(seed)] * config.period, maxlen=config.period
        )
        self._previous = seed

    def next(self, candle: OHLCV) -> IndicatorResult:
        self._true_ranges.append(calculate_true_range(candle, self._previous))
        self._previous = candle

        atr = sum(self._true_ranges) / len(self._true_ranges)
        return IndicatorResult(values=(atr, calculate_natr(atr, candle.close)))
