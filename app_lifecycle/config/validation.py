"""Configuration validation utilities."""

import re
from dataclasses import dataclass
from typing import Any

from .defaults import LoggingParams, TrackerParams

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_tracker_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate tracker parameters."""
        errors = []

        for name in ("event_name", "initial_value", "synthetic_value", "active_value"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-empty string",
                        value=value
                    ))

        if "inactive_pattern" in params:
            value = params["inactive_pattern"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="inactive_pattern",
                    message="Must be a non-empty string",
                    value=value
                ))
            else:
                try:
                    pattern = re.compile(value)
                except re.error as exc:
                    errors.append(ValidationError(
                        field="inactive_pattern",
                        message=f"Must be a valid regular expression: {exc}",
                        value=value
                    ))
                else:
                    # A value may never classify as both active and inactive
                    active_value = params.get("active_value")
                    if isinstance(active_value, str) and pattern.search(active_value):
                        errors.append(ValidationError(
                            field="inactive_pattern",
                            message="Must not match active_value",
                            value=value
                        ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in _LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {sorted(_LEVELS)}",
                    value=value
                ))

        for name in ("format_json", "include_timestamp", "include_caller"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a boolean",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_unknown_fields(section: str, params: dict[str, Any], params_cls: type) -> list[ValidationError]:
        """Report keys that do not name a field of params_cls."""
        known = set(params_cls.__dataclass_fields__)
        return [
            ValidationError(
                field=f"{section}.{name}",
                message="Unknown field",
                value=params[name]
            )
            for name in params
            if name not in known
        ]

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        sections = (
            ("tracker", TrackerParams, ConfigValidator.validate_tracker_params),
            ("logging", LoggingParams, ConfigValidator.validate_logging_params),
        )

        for section, params_cls, validate in sections:
            if section not in config:
                continue

            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue

            errors.extend(ConfigValidator.validate_unknown_fields(section, params, params_cls))
            errors.extend(validate(params))

        return errors
