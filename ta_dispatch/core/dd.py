"""
Dynamically dispatchable indicators.

IndicatorConfigDyn and IndicatorInstanceDyn are narrow interfaces parameterized
only by the candle type, so a host can keep configurations and instances of
different indicator kinds in one collection. DynConfig and DynInstance are the
single generic bridge from the static capabilities: they wrap any
IndicatorConfig / IndicatorInstance, so no indicator needs adapter code of its
own.

The static init() and over() consume their configuration, while the dynamic
ones only borrow it. DynConfig therefore duplicates the wrapped configuration
on every init() and over() call, and nowhere else. Stepping a DynInstance
delegates directly with no duplication.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, TypeVar

from ..errors import IndicatorError
from ..logging.config import get_dispatch_logger
from .candle import OHLCV
from .config import IndicatorConfig
from .instance import IndicatorInstance
from .result import IndicatorResult

logger = get_dispatch_logger(__name__)

T = TypeVar("T", bound=OHLCV)


class IndicatorInstanceDyn(ABC, Generic[T]):
    """Dynamically dispatchable IndicatorInstance."""

    @abstractmethod
    def next(self, candle: T) -> IndicatorResult:
        """Evaluate one candle and advance the state."""

    @abstractmethod
    def over(self, inputs: Iterable[T]) -> list[IndicatorResult]:
        """Evaluate the state over a sequence of candles, in order."""

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """(raw_count, signal_count) of every result."""

    @abstractmethod
    def name(self) -> str:
        """Name of the indicator kind."""


class IndicatorConfigDyn(ABC, Generic[T]):
    """Dynamically dispatchable IndicatorConfig."""

    @abstractmethod
    def init(self, seed: T) -> IndicatorInstanceDyn[T]:
        """Build a fresh instance from the current parameters."""

    @abstractmethod
    def over(self, inputs: Iterable[T]) -> list[IndicatorResult]:
        """Evaluate the current parameters over a sequence of candles."""

    @abstractmethod
    def name(self) -> str:
        """Name of the indicator kind."""

    @abstractmethod
    def validate(self) -> bool:
        """Check the current parameter set."""

    @abstractmethod
    def set(self, name: str, value: str) -> None:
        """Set one parameter from its string encoding."""

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """(raw_count, signal_count) emitted by every instance."""


class DynInstance(IndicatorInstanceDyn[T]):
    """Erases the concrete type of any IndicatorInstance."""

    def __init__(self, instance: IndicatorInstance):
        if not isinstance(instance, IndicatorInstance):
            raise TypeError(f"Expected an IndicatorInstance, got {type(instance).__name__}")
        self._instance = instance

    @property
    def instance(self) -> IndicatorInstance:
        return self._instance

    def next(self, candle: T) -> IndicatorResult:
        return self._instance.next(candle)

    def over(self, inputs: Iterable[T]) -> list[IndicatorResult]:
        return self._instance.over(inputs)

    def size(self) -> tuple[int, int]:
        return self._instance.size()

    def name(self) -> str:
        return self._instance.name()

    def __repr__(self) -> str:
        return f"<DynInstance({self._instance!r})>"


class DynConfig(IndicatorConfigDyn[T]):
    """Erases the concrete type of any IndicatorConfig."""

    def __init__(self, config: IndicatorConfig):
        if not isinstance(config, IndicatorConfig):
            raise TypeError(f"Expected an IndicatorConfig, got {type(config).__name__}")
        self._config = config

    @property
    def config(self) -> IndicatorConfig:
        """Wrapped configuration. Mutate it through set() only."""
        return self._config

    def init(self, seed: T) -> IndicatorInstanceDyn[T]:
        try:
            instance = self._config.copy().init(seed)
        except IndicatorError as e:
            logger.debug(
                "Dynamic indicator init failed",
                indicator=self.name(),
                error_type=type(e).__name__,
                error=str(e),
            )
            raise
        return DynInstance(instance)

    def over(self, inputs: Iterable[T]) -> list[IndicatorResult]:
        return self._config.copy().over(inputs)

    def name(self) -> str:
        return self._config.name()

    def validate(self) -> bool:
        return self._config.validate()

    def set(self, name: str, value: str) -> None:
        self._config.set(name, value)

    def size(self) -> tuple[int, int]:
        return self._config.size()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DynConfig):
            return NotImplemented
        return self._config == other._config

    def __repr__(self) -> str:
        return f"<DynConfig({self._config!r})>"


def into_dyn(config: Any) -> IndicatorConfigDyn:
    """Box a configuration behind IndicatorConfigDyn; already boxed values pass through."""
    if isinstance(config, IndicatorConfigDyn):
        return config
    return DynConfig(config)


def into_dyn_instance(instance: Any) -> IndicatorInstanceDyn:
    """Box an instance behind IndicatorInstanceDyn; already boxed values pass through."""
    if isinstance(instance, IndicatorInstanceDyn):
        return instance
    return DynInstance(instance)
