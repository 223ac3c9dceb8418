"""RVOL (Relative Volume) indicator"""

import math
from collections import deque
from dataclasses import dataclass
from typing import Optional

from ..config.defaults import get_default_config
from ..core.candle import OHLCV
from ..core.config import IndicatorConfig, Parameter, is_period, parameter_map, period_parameter
from ..core.instance import IndicatorInstance
from ..core.result import Action, IndicatorResult
from ..errors import IncompatibleSeedError
from .registry import register_indicator

_DEFAULTS = get_default_config().rvol


def calculate_rvol(current_volume: float, volume_history: list[float], period: int = 20) -> Optional[float]:
    """
    Calculate Relative Volume (RVOL)

    RVOL = current_volume / SMA(volume_history)

    Args:
        current_volume: Current bar volume
        volume_history: Historical volume values (excluding current)
        period: Lookback period for average (default 20)

    Returns:
        RVOL value or None if insufficient data
    """
    if len(volume_history) < period:
        return None

    # Use last 'period' values for average
    recent_volumes = volume_history[-period:]
    volume_average = sum(recent_volumes) / len(recent_volumes)

    if volume_average <= 0:
        return None

    return current_volume / volume_average


@register_indicator
@dataclass
class RelativeVolume(IndicatorConfig):
    """
    Volume relative to its recent average.

    Emits BUY on a bullish candle and SELL on a bearish one whenever RVOL
    reaches the threshold.
    """
    period: int = _DEFAULTS.period
    threshold: float = _DEFAULTS.threshold

    NAME = "rvol"
    PARAMETERS = parameter_map(
        period_parameter(description="Volume averaging window"),
        Parameter(
            name="threshold",
            parse=float,
            check=lambda value: math.isfinite(value) and value > 0,
            description="RVOL needed to emit a signal",
        ),
    )

    def validate(self) -> bool:
        return (
            is_period(self.period)
            and isinstance(self.threshold, (int, float))
            and math.isfinite(self.threshold)
            and self.threshold > 0
        )

    def size(self) -> tuple[int, int]:
        return 1, 1

    def instantiate(self, seed: OHLCV) -> "RelativeVolumeInstance":
        if not math.isfinite(seed.volume) or seed.volume < 0:
            raise IncompatibleSeedError(
                f"Seed volume {seed.volume!r} cannot start a volume history",
                indicator=self.NAME,
                seed=seed,
            )
        return RelativeVolumeInstance(self, seed.volume)


class RelativeVolumeInstance(IndicatorInstance[RelativeVolume]):
    """Volume history excluding the current bar, pre-filled with the seed volume."""

    def __init__(self, config: RelativeVolume, seed_volume: float):
        super().__init__(config)
        self._period = config.period
        self._threshold = config.threshold
        self._history = deque([seed_volume] * config.period, maxlen=config.period)

    def next(self, candle: OHLCV) -> IndicatorResult:
        rvol = calculate_rvol(candle.volume, list(self._history), self._period)
        self._history.append(candle.volume)

        if rvol is None:
            return IndicatorResult(values=(math.nan,), signals=(Action.NONE,))

        signal = Action.NONE
        if rvol >= self._threshold:
            signal = Action.from_sign(candle.close - candle.open)

        return IndicatorResult(values=(rvol,), signals=(signal,))
