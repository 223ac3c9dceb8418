"""
Static indicator configuration capability.

Each indicator kind is a mutable dataclass deriving from IndicatorConfig. It
declares its tunable fields once, as a PARAMETERS mapping of name to
Parameter, so a host can drive it from text through set(). A configuration is
consumed by init(): the resulting instance keeps it, and callers do not reuse
it afterwards.
"""

import copy
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Iterable, Mapping, Optional, Sequence

from ..errors import InvalidParameterError
from ..logging.config import get_dispatch_logger, log_indicator_init
from .candle import OHLCV, Source
from .instance import IndicatorInstance
from .result import IndicatorResult

if TYPE_CHECKING:
    from .dd import IndicatorConfigDyn

logger = get_dispatch_logger(__name__)

# Longest rolling window any indicator may allocate.
MAX_PERIOD = 65535


@dataclass(frozen=True)
class Parameter:
    """Typed, text-settable field of an indicator configuration."""
    name: str
    parse: Callable[[str], Any]
    check: Optional[Callable[[Any], bool]] = None
    description: str = ""

    def convert(self, text: str) -> Any:
        """
        Parse and check a string-encoded value.

        Raises:
            InvalidParameterError: If the text does not parse or the value is
                outside the field's domain
        """
        if not isinstance(text, str):
            raise InvalidParameterError(
                f"Parameter '{self.name}' expects a string value, got {type(text).__name__}",
                parameter=self.name,
                value=repr(text),
            )

        try:
            value = self.parse(text.strip())
        except (TypeError, ValueError) as e:
            raise InvalidParameterError(
                f"Cannot parse '{text}' for parameter '{self.name}': {e}",
                parameter=self.name,
                value=text,
            ) from e

        if self.check is not None and not self.check(value):
            raise InvalidParameterError(
                f"Value '{text}' is out of range for parameter '{self.name}'",
                parameter=self.name,
                value=text,
                context={"description": self.description} if self.description else None,
            )

        return value


def _bounded(minimum: Optional[float], maximum: Optional[float]) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        if isinstance(value, float) and not math.isfinite(value):
            return False
        if minimum is not None and value < minimum:
            return False
        if maximum is not None and value > maximum:
            return False
        return True
    return check


def _parse_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered in ("true", "yes", "on", "1"):
        return True
    if lowered in ("false", "no", "off", "0"):
        return False
    raise ValueError(f"'{text}' is not a boolean")


def int_parameter(name: str, minimum: Optional[int] = None, maximum: Optional[int] = None,
                  description: str = "") -> Parameter:
    return Parameter(name=name, parse=int, check=_bounded(minimum, maximum), description=description)


def float_parameter(name: str, minimum: Optional[float] = None, maximum: Optional[float] = None,
                    description: str = "") -> Parameter:
    return Parameter(name=name, parse=float, check=_bounded(minimum, maximum), description=description)


def bool_parameter(name: str, description: str = "") -> Parameter:
    return Parameter(name=name, parse=_parse_bool, description=description)


def source_parameter(name: str = "source", description: str = "") -> Parameter:
    return Parameter(name=name, parse=Source.parse, description=description)


def period_parameter(name: str = "period", description: str = "") -> Parameter:
    return int_parameter(name, minimum=1, maximum=MAX_PERIOD, description=description)


def is_period(value: Any) -> bool:
    """True for an int window length within 1..MAX_PERIOD."""
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= MAX_PERIOD


def parameter_map(*parameters: Parameter) -> dict[str, Parameter]:
    """Index parameters by name, rejecting duplicates."""
    result: dict[str, Parameter] = {}
    for parameter in parameters:
        if parameter.name in result:
            raise ValueError(f"Duplicate parameter '{parameter.name}'")
        result[parameter.name] = parameter
    return result


class IndicatorConfig(ABC):
    """
    Parameters of one indicator kind, and the factory for its instances.

    Subclasses set NAME and PARAMETERS, and implement validate(), size() and
    instantiate(). init() and over() are shared.
    """

    NAME: ClassVar[str] = ""
    PARAMETERS: ClassVar[Mapping[str, Parameter]] = {}

    def name(self) -> str:
        """Name of the indicator kind."""
        return self.NAME

    @abstractmethod
    def validate(self) -> bool:
        """
        Check the current parameter set.

        Must be pure and never raise; returns False for any combination
        that would make init() unsafe or meaningless.
        """

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """(raw_count, signal_count) emitted by every instance of this config."""

    @abstractmethod
    def instantiate(self, seed: OHLCV) -> IndicatorInstance:
        """
        Build the initial state from a valid configuration and a seed candle.

        Raises:
            IncompatibleSeedError: If the seed cannot satisfy the parameters
        """

    def set(self, name: str, value: str) -> None:
        """
        Set one parameter from its string encoding.

        The configuration is left unchanged when this raises.

        Raises:
            InvalidParameterError: Unknown name, unparsable or out-of-range value
        """
        parameter = self.PARAMETERS.get(name)
        if parameter is None:
            raise InvalidParameterError(
                f"Unknown parameter '{name}' for indicator '{self.name()}'",
                parameter=name,
                value=value,
                context={"known": sorted(self.PARAMETERS)},
            )

        converted = parameter.convert(value)
        setattr(self, parameter.name, converted)

    def get(self, name: str) -> Any:
        """Current value of a declared parameter."""
        if name not in self.PARAMETERS:
            raise InvalidParameterError(
                f"Unknown parameter '{name}' for indicator '{self.name()}'",
                parameter=name,
            )
        return getattr(self, name)

    def parameters(self) -> dict[str, Any]:
        """Current values of all declared parameters."""
        return {name: getattr(self, name) for name in self.PARAMETERS}

    def init(self, seed: OHLCV) -> IndicatorInstance:
        """
        Consume this configuration and build an instance seeded with the
        first known candle.

        Raises:
            InvalidParameterError: If validate() rejects the parameters
            IncompatibleSeedError: If the seed cannot satisfy the parameters
        """
        if not self.validate():
            raise InvalidParameterError(
                f"Invalid configuration for indicator '{self.name()}'",
                context={"parameters": self.parameters()},
            )

        instance = self.instantiate(seed)
        log_indicator_init(logger, self.name(), self.size(), seed, context=self.parameters())
        return instance

    def over(self, inputs: Iterable[OHLCV]) -> list[IndicatorResult]:
        """
        Consume this configuration and evaluate it over a candle sequence.

        The first candle seeds the instance and is then evaluated again
        along with the rest. An empty input returns an empty list without
        initializing anything.

        Returns:
            Exactly one result per input candle, in input order
        """
        if not isinstance(inputs, Sequence):
            inputs = list(inputs)

        if len(inputs) == 0:
            return []

        instance = self.init(inputs[0])
        return instance.over(inputs)

    def copy(self) -> "IndicatorConfig":
        """Independent duplicate of this configuration."""
        return copy.deepcopy(self)

    def boxed(self) -> "IndicatorConfigDyn":
        """This configuration behind the dynamic dispatch interface."""
        from .dd import into_dyn

        return into_dyn(self)
