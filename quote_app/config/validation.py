"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

SEED_CONVENTIONS = ("chronological", "feed_order")
OUTPUT_SIZES = ("compact", "full")
SORT_DIRECTIONS = ("ascending", "descending")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_api_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate provider parameters."""
        errors = []

        if "base_url" in params:
            value = params["base_url"]
            parsed = urlparse(value) if isinstance(value, str) else None
            if parsed is None or not parsed.scheme or not parsed.netloc:
                errors.append(ValidationError(
                    field="base_url",
                    message="Must be an absolute http(s) URL",
                    value=value
                ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                errors.append(ValidationError(
                    field="timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        if "api_key" in params:
            value = params["api_key"]
            if not isinstance(value, str):
                errors.append(ValidationError(
                    field="api_key",
                    message="Must be a string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_series_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate daily series parameters."""
        errors = []

        if "seed_convention" in params and params["seed_convention"] not in SEED_CONVENTIONS:
            errors.append(ValidationError(
                field="seed_convention",
                message=f"Must be one of {', '.join(SEED_CONVENTIONS)}",
                value=params["seed_convention"]
            ))

        if "output_size" in params and params["output_size"] not in OUTPUT_SIZES:
            errors.append(ValidationError(
                field="output_size",
                message=f"Must be one of {', '.join(OUTPUT_SIZES)}",
                value=params["output_size"]
            ))

        if "prefer_adjusted" in params and not isinstance(params["prefer_adjusted"], bool):
            errors.append(ValidationError(
                field="prefer_adjusted",
                message="Must be a boolean",
                value=params["prefer_adjusted"]
            ))

        return errors

    @staticmethod
    def validate_options_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate options view parameters."""
        errors = []

        if "default_direction" in params and params["default_direction"] not in SORT_DIRECTIONS:
            errors.append(ValidationError(
                field="default_direction",
                message="Must be 'ascending' or 'descending'",
                value=params["default_direction"]
            ))

        if "default_sort_key" in params:
            value = params["default_sort_key"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="default_sort_key",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_server_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate proxy server parameters."""
        errors = []

        if "port" in params:
            value = params["port"]
            if isinstance(value, bool) or not isinstance(value, int) or not 0 < value < 65536:
                errors.append(ValidationError(
                    field="port",
                    message="Must be an integer between 1 and 65535",
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

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "api" in config:
            errors.extend(ConfigValidator.validate_api_params(config["api"]))

        if "series" in config:
            errors.extend(ConfigValidator.validate_series_params(config["series"]))

        if "options" in config:
            errors.extend(ConfigValidator.validate_options_params(config["options"]))

        if "server" in config:
            errors.extend(ConfigValidator.validate_server_params(config["server"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
