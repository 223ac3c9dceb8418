"""Builds heterogeneous indicator collections from YAML strategy descriptions."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..core.dd import IndicatorConfigDyn
from ..errors import InvalidParameterError, StrategyConfigError
from ..indicators.registry import IndicatorRegistry, default_registry
from ..logging.config import get_logger
from .validation import StrategyValidator

logger = get_logger(__name__)


def _to_text(value: Any) -> str:
    """Encode a YAML scalar the way indicator setters expect it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class StrategyLoader:
    """
    Turns a strategy description into dynamically dispatchable configurations.

    Every parameter goes through IndicatorConfigDyn.set() as text, so the
    loader never needs to know the concrete indicator types.
    """

    registry: IndicatorRegistry

    @classmethod
    def create(cls, registry: Optional[IndicatorRegistry] = None) -> "StrategyLoader":
        """Create a StrategyLoader instance."""
        return cls(registry=registry if registry is not None else default_registry())

    def load_file(self, path: Union[str, Path]) -> list[IndicatorConfigDyn]:
        """Load a strategy from a YAML file."""
        with open(path, encoding="utf-8") as f:
            text = f.read()
        return self.load_text(text)

    def load_text(self, text: str) -> list[IndicatorConfigDyn]:
        """Load a strategy from YAML text."""
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise StrategyConfigError(f"Strategy is not valid YAML: {e}") from e
        return self.build(document)

    def build(self, document: Any) -> list[IndicatorConfigDyn]:
        """
        Build configurations from an already parsed strategy document.

        Raises:
            StrategyConfigError: If the document structure is invalid
            UnknownIndicatorError: If an entry names an unregistered kind
            InvalidParameterError: If a parameter is rejected or the
                resulting configuration does not validate
        """
        problems = StrategyValidator.validate_document(document)
        if problems:
            logger.warning(
                "Strategy document rejected",
                problem_count=len(problems),
                problems=[f"{p.field}: {p.message}" for p in problems],
            )
            raise StrategyConfigError(
                f"Strategy document has {len(problems)} problem(s)",
                problems=problems,
            )

        return [
            self.build_indicator(entry, index)
            for index, entry in enumerate(document["indicators"])
        ]

    def build_indicator(self, entry: dict[str, Any], index: int = 0) -> IndicatorConfigDyn:
        """Build and validate the configuration for one indicators entry."""
        config = self.registry.create_dyn(entry["kind"])
        params = entry.get("params") or {}

        for name, value in params.items():
            try:
                config.set(name, _to_text(value))
            except InvalidParameterError as e:
                logger.warning(
                    "Indicator parameter rejected",
                    indicator=config.name(),
                    index=index,
                    parameter=name,
                    value=value,
                    error=str(e),
                )
                raise

        if not config.validate():
            logger.warning("Indicator configuration invalid", indicator=config.name(), index=index)
            raise InvalidParameterError(
                f"Configuration for indicators[{index}] ({config.name()}) does not validate",
                context={"index": index, "params": params},
            )

        logger.info(
            "Indicator configured",
            indicator=config.name(),
            index=index,
            size=config.size(),
            params=params,
        )
        return config
