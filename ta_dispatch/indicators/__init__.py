"""Bundled indicator kinds, registered by name for text-driven construction"""

from .atr import AverageTrueRange, calculate_natr, calculate_true_range
from .example import Example
from .registry import IndicatorRegistry, default_registry, register_indicator
from .rvol import RelativeVolume, calculate_rvol

__all__ = [
    "IndicatorRegistry",
    "default_registry",
    "register_indicator",
    "Example",
    "AverageTrueRange",
    "RelativeVolume",
    "calculate_true_range",
    "calculate_natr",
    "calculate_rvol",
]
