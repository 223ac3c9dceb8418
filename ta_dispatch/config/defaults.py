"""Default parameters for the bundled indicator kinds."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExampleParams:
    """Example moving-average cross parameters."""
    period: int = 2
    source: str = "close"


@dataclass(frozen=True)
class ATRParams:
    """ATR calculation parameters."""
    period: int = 14


@dataclass(frozen=True)
class RVOLParams:
    """Relative volume parameters."""
    period: int = 20
    threshold: float = 1.5                           # RVOL needed to emit a signal


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    example: ExampleParams
    atr: ATRParams
    rvol: RVOLParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        example=ExampleParams(),
        atr=ATRParams(),
        rvol=RVOLParams(),
    )
