"""
Strategy configuration error classifications.

Raised while turning a text-driven strategy description into indicator
configurations.
"""

from typing import Any, Optional

from .indicator import IndicatorError


class UnknownIndicatorError(IndicatorError):
    """Requested indicator kind is not registered."""

    def __init__(self, message: str, kind: Optional[str] = None,
                 available: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.kind = kind
        self.available = available or []


class StrategyConfigError(IndicatorError):
    """Strategy document is malformed or fails structural validation."""

    def __init__(self, message: str, problems: Optional[list[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.problems = problems or []
