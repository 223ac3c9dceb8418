"""
Streaming indicator state.

An IndicatorInstance is created only by its configuration's init() and stays
bound to that configuration for its whole life. Stepping never raises: numeric
edge cases are reported as NaN values or Action.NONE signals.

Subclasses read their parameters once, in __init__. A later set() on the
configuration does not reach a running instance.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, Iterable, TypeVar

from .candle import OHLCV
from .result import IndicatorResult

if TYPE_CHECKING:
    from .config import IndicatorConfig

C = TypeVar("C", bound="IndicatorConfig")


class IndicatorInstance(ABC, Generic[C]):
    """Per-run state of one indicator, advanced one candle at a time."""

    def __init__(self, config: C):
        self._config = config

    @property
    def config(self) -> C:
        """Configuration that produced this instance."""
        return self._config

    @abstractmethod
    def next(self, candle: OHLCV) -> IndicatorResult:
        """Evaluate one candle and advance the state."""

    def over(self, inputs: Iterable[OHLCV]) -> list[IndicatorResult]:
        """
        Evaluate a sequence of candles in order.

        Returns:
            One result per candle, in input order
        """
        return [self.next(candle) for candle in inputs]

    def size(self) -> tuple[int, int]:
        return self._config.size()

    def name(self) -> str:
        return self._config.name()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(config={self._config!r})>"
