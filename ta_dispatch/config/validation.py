"""Strategy document validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a strategy document validation error."""
    field: str
    message: str
    value: Any


class StrategyValidator:
    """Validates the structure of strategy documents."""

    @staticmethod
    def validate_indicator_entry(index: int, entry: Any) -> list[ValidationError]:
        """Validate one entry of the indicators list."""
        errors = []
        prefix = f"indicators[{index}]"

        if not isinstance(entry, dict):
            errors.append(ValidationError(
                field=prefix,
                message="Must be a mapping with a 'kind' key",
                value=entry
            ))
            return errors

        # Validate kind
        kind = entry.get("kind")
        if not isinstance(kind, str) or not kind.strip():
            errors.append(ValidationError(
                field=f"{prefix}.kind",
                message="Must be a non-empty string",
                value=kind
            ))

        # Validate params
        params = entry.get("params")
        if params is not None:
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=f"{prefix}.params",
                    message="Must be a mapping of parameter name to value",
                    value=params
                ))
            else:
                for name, value in params.items():
                    if not isinstance(name, str):
                        errors.append(ValidationError(
                            field=f"{prefix}.params",
                            message="Parameter names must be strings",
                            value=name
                        ))
                    elif isinstance(value, (dict, list)) or value is None:
                        errors.append(ValidationError(
                            field=f"{prefix}.params.{name}",
                            message="Must be a scalar value",
                            value=value
                        ))

        # Unknown keys
        for key in entry:
            if key not in ("kind", "params"):
                errors.append(ValidationError(
                    field=f"{prefix}.{key}",
                    message="Unknown key",
                    value=entry[key]
                ))

        return errors

    @staticmethod
    def validate_document(document: Any) -> list[ValidationError]:
        """Validate a complete strategy document."""
        if not isinstance(document, dict):
            return [ValidationError(
                field="",
                message="Strategy document must be a mapping",
                value=document
            )]

        indicators = document.get("indicators")
        if not isinstance(indicators, list):
            return [ValidationError(
                field="indicators",
                message="Must be a list of indicator entries",
                value=indicators
            )]

        errors = []
        for index, entry in enumerate(indicators):
            errors.extend(StrategyValidator.validate_indicator_entry(index, entry))

        return errors
