"""
Example indicator: price crossing its simple moving average.

Raw value is the SMA of the configured price source over `period` candles.
The signal is BUY when the source crosses above the average and SELL when it
crosses below.
"""

import math
from collections import deque
from dataclasses import dataclass

from ..config.defaults import get_default_config
from ..core.candle import OHLCV, Source
from ..core.config import (
    IndicatorConfig,
    is_period,
    parameter_map,
    period_parameter,
    source_parameter,
)
from ..core.instance import IndicatorInstance
from ..core.result import Action, IndicatorResult
from ..errors import IncompatibleSeedError
from .registry import register_indicator

_DEFAULTS = get_default_config().example


@register_indicator
@dataclass
class Example(IndicatorConfig):
    """Moving-average cross configuration."""
    period: int = _DEFAULTS.period
    source: Source = Source(_DEFAULTS.source)

    NAME = "example"
    PARAMETERS = parameter_map(
        period_parameter(description="Averaging window length"),
        source_parameter("source", description="Price source to average"),
    )

    def validate(self) -> bool:
        return is_period(self.period) and isinstance(self.source, Source)

    def size(self) -> tuple[int, int]:
        return 1, 1

    def instantiate(self, seed: OHLCV) -> "ExampleInstance":
        value = self.source.value_of(seed)
        if not math.isfinite(value):
            raise IncompatibleSeedError(
                f"Seed {self.source.value} value {value!r} is not finite",
                indicator=self.NAME,
                seed=seed,
            )
        return ExampleInstance(self, value)


class ExampleInstance(IndicatorInstance[Example]):
    """Rolling window state for Example, pre-filled with the seed value."""

    def __init__(self, config: Example, seed_value: float):
        super().__init__(config)
        self._source = config.source
        self._window = deque([seed_value] * config.period, maxlen=config.period)
        self._last_diff = 0.0

    def next(self, candle: OHLCV) -> IndicatorResult:
        value = self._source.value_of(candle)
        self._window.append(value)
        average = sum(self._window) / len(self._window)

        diff = value - average
        if self._last_diff <= 0 < diff:
            signal = Action.BUY
        elif self._last_diff >= 0 > diff:
            signal = Action.SELL
        else:
            signal = Action.NONE

        self._last_diff = diff
        return IndicatorResult(values=(average,), signals=(signal,))
