"""
Indicator error classifications.

These exceptions are raised by configuration setters and by instance
initialization. Once an instance exists, stepping it never raises.
"""

from typing import Any, Dict, Optional


class IndicatorError(Exception):
    """Base class for all errors raised by the dispatch core."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class InvalidParameterError(IndicatorError):
    """Unknown parameter name, unparsable value, or a rejected parameter set."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter
        self.value = value


class IncompatibleSeedError(IndicatorError):
    """Parameters cannot be seeded from the supplied first candle."""

    def __init__(self, message: str, indicator: Optional[str] = None,
                 seed: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.indicator = indicator
        self.seed = seed


class IndicatorDomainError(IndicatorError):
    """Indicator-specific failure, passed through the dispatch layer unchanged."""

    def __init__(self, message: str, indicator: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.indicator = indicator
