"""Indicator output payload: raw values plus discrete signals"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


class Action(str, Enum):
    """Discrete signal emitted by an indicator for one candle."""
    BUY = "buy"
    SELL = "sell"
    NONE = "none"

    @classmethod
    def from_sign(cls, value: float) -> "Action":
        """Map a number's sign to an action (NaN and zero map to NONE)."""
        if value > 0:
            return cls.BUY
        if value < 0:
            return cls.SELL
        return cls.NONE

    @property
    def sign(self) -> int:
        if self is Action.BUY:
            return 1
        if self is Action.SELL:
            return -1
        return 0


def _same_value(left: Any, right: Any) -> bool:
    if isinstance(left, float) and isinstance(right, float) and math.isnan(left) and math.isnan(right):
        return True
    return left == right


@dataclass(frozen=True, eq=False)
class IndicatorResult:
    """
    Fixed-arity output for one processed candle.

    Raw values are floats, NaN marks an undefined value (e.g. an empty
    window). Two results compare equal when their values and signals match,
    treating NaN as equal to NaN.
    """
    values: tuple[float, ...] = ()
    signals: tuple[Action, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))
        object.__setattr__(self, "signals", tuple(Action(s) for s in self.signals))

    @classmethod
    def of(cls, values: Iterable[float] = (), signals: Iterable[Action] = ()) -> "IndicatorResult":
        """Build a result from any iterables."""
        return cls(values=tuple(values), signals=tuple(signals))

    @property
    def size(self) -> tuple[int, int]:
        """(raw_count, signal_count) of this result."""
        return len(self.values), len(self.signals)

    def value(self, index: int) -> float:
        return self.values[index]

    def signal(self, index: int) -> Action:
        return self.signals[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndicatorResult):
            return NotImplemented
        if self.size != other.size or self.signals != other.signals:
            return False
        return all(_same_value(a, b) for a, b in zip(self.values, other.values))

    def __hash__(self) -> int:
        normalized = tuple(None if math.isnan(v) else v for v in self.values)
        return hash((normalized, self.signals))
