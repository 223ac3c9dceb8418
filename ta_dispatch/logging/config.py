"""
Centralized logging configuration for the indicator dispatch core.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the package should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structlog for hosts that want dispatch events rendered.

    The package itself only emits events; nothing is printed until a host
    calls this or configures structlog some other way.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON lines; otherwise console output
        include_timestamp: Stamp each event with an ISO timestamp
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=sys.stdout,
        format="%(message)s",
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_dispatch_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the dispatch subsystem.

    Used by the configuration and dynamic adapter layers so their events
    can be filtered apart from indicator-specific output.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for dispatch events
    """
    return structlog.get_logger(name, subsystem="dispatch")


def log_indicator_init(
    logger: FilteringBoundLogger,
    indicator: str,
    size: tuple[int, int],
    seed: Any,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log creation of an indicator instance with standardized format.

    Args:
        logger: Structlog logger instance
        indicator: Name of the indicator kind
        size: Declared (raw_count, signal_count) arity
        seed: Candle used to seed the instance
        context: Additional context data, typically the parameter values
    """
    bound_logger = logger.bind(
        indicator=indicator,
        raw_count=size[0],
        signal_count=size[1],
        seed=repr(seed),
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Indicator instance initialized")
