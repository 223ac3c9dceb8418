"""
Error classification for indicator configuration and dispatch.

Every failure surfaced by the dispatch core derives from IndicatorError, so a
host can catch the whole family at the call that failed.
"""

from .configuration import StrategyConfigError, UnknownIndicatorError
from .indicator import (
    IncompatibleSeedError,
    IndicatorDomainError,
    IndicatorError,
    InvalidParameterError,
)

__all__ = [
    # Indicator errors
    "IndicatorError",
    "InvalidParameterError",
    "IncompatibleSeedError",
    "IndicatorDomainError",
    # Configuration errors
    "UnknownIndicatorError",
    "StrategyConfigError",
]
