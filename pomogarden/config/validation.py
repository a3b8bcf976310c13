"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

GROWTH_POLICIES = ("staged", "unbounded")
STORAGE_BACKENDS = ("memory", "sqlite")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_timer_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate session durations."""
        errors = []

        for field in ("work_duration_sec", "break_duration_sec"):
            if field in params:
                value = params[field]
                if not _is_int(value) or value <= 0:
                    errors.append(ValidationError(
                        field=field,
                        message="Must be a positive integer number of seconds",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_garden_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate garden growth parameters."""
        errors = []

        if "policy" in params:
            value = params["policy"]
            if value not in GROWTH_POLICIES:
                errors.append(ValidationError(
                    field="policy",
                    message=f"Must be one of {', '.join(GROWTH_POLICIES)}",
                    value=value
                ))

        if "garden_size" in params:
            value = params["garden_size"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="garden_size",
                    message="Must be a positive integer",
                    value=value
                ))

        if "max_stage" in params:
            value = params["max_stage"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="max_stage",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "storage_key" in params:
            value = params["storage_key"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="storage_key",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_storage_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate key-value store parameters."""
        errors = []

        if "backend" in params:
            value = params["backend"]
            if value not in STORAGE_BACKENDS:
                errors.append(ValidationError(
                    field="backend",
                    message=f"Must be one of {', '.join(STORAGE_BACKENDS)}",
                    value=value
                ))

        if params.get("backend") == "sqlite":
            value = params.get("db_path")
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="db_path",
                    message="Must be a non-empty path when backend is sqlite",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params and not isinstance(params["format_json"], bool):
            errors.append(ValidationError(
                field="format_json",
                message="Must be a boolean",
                value=params["format_json"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "timer" in config:
            errors.extend(ConfigValidator.validate_timer_params(config["timer"]))

        if "garden" in config:
            errors.extend(ConfigValidator.validate_garden_params(config["garden"]))

        if "storage" in config:
            errors.extend(ConfigValidator.validate_storage_params(config["storage"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
