"""Name-to-class registry of indicator configuration kinds"""

from typing import Optional, TypeVar

from ..core.config import IndicatorConfig
from ..core.dd import IndicatorConfigDyn, into_dyn
from ..errors import UnknownIndicatorError

C = TypeVar("C", bound=type)


class IndicatorRegistry:
    """Maps indicator kind names to their configuration classes."""

    def __init__(self):
        self._kinds: dict[str, type[IndicatorConfig]] = {}

    @staticmethod
    def _normalize(kind: str) -> str:
        return kind.strip().lower()

    def register(self, config_cls: C) -> C:
        """Register a configuration class under its NAME."""
        if not (isinstance(config_cls, type) and issubclass(config_cls, IndicatorConfig)):
            raise TypeError(f"{config_cls!r} is not an IndicatorConfig subclass")

        kind = self._normalize(config_cls.NAME)
        if not kind:
            raise ValueError(f"{config_cls.__name__} has no NAME")

        existing = self._kinds.get(kind)
        if existing is not None and existing is not config_cls:
            raise ValueError(
                f"Indicator kind '{kind}' already registered by {existing.__name__}"
            )

        self._kinds[kind] = config_cls
        return config_cls

    def get(self, kind: str) -> type[IndicatorConfig]:
        """
        Look up a configuration class.

        Raises:
            UnknownIndicatorError: If the kind is not registered
        """
        config_cls = self._kinds.get(self._normalize(kind))
        if config_cls is None:
            raise UnknownIndicatorError(
                f"Unknown indicator kind '{kind}'",
                kind=kind,
                available=self.kinds(),
            )
        return config_cls

    def create(self, kind: str) -> IndicatorConfig:
        """Default configuration of the given kind."""
        return self.get(kind)()

    def create_dyn(self, kind: str) -> IndicatorConfigDyn:
        """Default configuration of the given kind, behind the dynamic interface."""
        return into_dyn(self.create(kind))

    def kinds(self) -> list[str]:
        return sorted(self._kinds)

    def __contains__(self, kind: object) -> bool:
        return isinstance(kind, str) and self._normalize(kind) in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)


_registry: Optional[IndicatorRegistry] = None


def default_registry() -> IndicatorRegistry:
    """Process-wide registry used by register_indicator."""
    global _registry
    if _registry is None:
        _registry = IndicatorRegistry()
    return _registry


def register_indicator(config_cls: C) -> C:
    """Class decorator registering an indicator kind in the default registry."""
    return default_registry().register(config_cls)
