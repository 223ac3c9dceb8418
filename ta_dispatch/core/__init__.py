"""
Indicator dispatch core.

Static configuration/instance capabilities, the candle and result payloads
they exchange, and the dynamic adapter layer that erases concrete indicator
types behind a uniform interface.
"""

from .candle import OHLCV, Candle, Source
from .config import (
    MAX_PERIOD,
    IndicatorConfig,
    Parameter,
    bool_parameter,
    float_parameter,
    int_parameter,
    is_period,
    parameter_map,
    period_parameter,
    source_parameter,
)
from .dd import (
    DynConfig,
    DynInstance,
    IndicatorConfigDyn,
    IndicatorInstanceDyn,
    into_dyn,
    into_dyn_instance,
)
from .instance import IndicatorInstance
from .result import Action, IndicatorResult

__all__ = [
    "OHLCV",
    "Candle",
    "Source",
    "Action",
    "IndicatorResult",
    "IndicatorConfig",
    "IndicatorInstance",
    "Parameter",
    "parameter_map",
    "int_parameter",
    "float_parameter",
    "bool_parameter",
    "source_parameter",
    "period_parameter",
    "is_period",
    "MAX_PERIOD",
    "IndicatorConfigDyn",
    "IndicatorInstanceDyn",
    "DynConfig",
    "DynInstance",
    "into_dyn",
    "into_dyn_instance",
]
