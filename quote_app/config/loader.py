"""Configuration loader with layered parameter precedence."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, is_dataclass
from pathlib import Path
from typing import Any, Optional, get_origin

import yaml

from .defaults import (
    ApiParams,
    AppConfig,
    LoggingParams,
    OptionsParams,
    SeriesParams,
    ServerParams,
    get_default_config,
)

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "ALPHA_VANTAGE_API_KEY": ("api", "api_key"),
    "PORT": ("server", "port"),
    "QUOTE_APP_LOG_LEVEL": ("logging", "level"),
}

_SECTION_TYPES = {
    "api": ApiParams,
    "series": SeriesParams,
    "options": OptionsParams,
    "server": ServerParams,
    "logging": LoggingParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with layered precedence."""

    config_dir: Path
    defaults: AppConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load settings.yaml overrides, empty when the file is absent."""
        settings_file = self.config_dir / "settings.yaml"

        if not settings_file.exists():
            return {}

        with open(settings_file) as f:
            file_config = yaml.safe_load(f)

        return file_config or {}

    def load_env_config(self, environ: Optional[Mapping[str, str]] = None) -> dict[str, Any]:
        """Collect overrides from environment variables."""
        environ = os.environ if environ is None else environ
        config: dict[str, Any] = {}

        for var, (section, key) in ENV_OVERRIDES.items():
            value = environ.get(var)
            if value:
                config.setdefault(section, {})[key] = value

        return config

    def merge_config(
        self,
        overrides: Optional[dict[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration layers into a plain dictionary.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Environment variables
        3. settings.yaml
        4. Defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())
        config = self._deep_merge(config, self.load_env_config(environ))

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(
        self,
        overrides: Optional[dict[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None
    ) -> AppConfig:
        """Merge all layers and build a typed AppConfig."""
        return build_config(self.merge_config(overrides, environ))

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if is_dataclass(obj):
            result = {}
            for f in fields(obj):
                value = getattr(obj, f.name)
                if is_dataclass(value):
                    result[f.name] = self._dataclass_to_dict(value)
                else:
                    result[f.name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def build_config(config: dict[str, Any]) -> AppConfig:
    """Build AppConfig from a merged dictionary, coercing env-provided strings."""
    sections = {}

    for section, params_type in _SECTION_TYPES.items():
        values = config.get(section, {}) or {}
        known = {f.name: f for f in fields(params_type)}
        kwargs = {}
        for key, value in values.items():
            if key not in known:
                continue
            kwargs[key] = _coerce(value, known[key].type)
        sections[section] = params_type(**kwargs)

    return AppConfig(**sections)


def _coerce(value: Any, annotation: Any) -> Any:
    """Coerce string values coming from the environment to the field type."""
    if not isinstance(value, str):
        if isinstance(value, list):
            return tuple(value)
        return value

    if get_origin(annotation) is tuple:
        return tuple(part.strip() for part in value.split(",") if part.strip())

    type_name = getattr(annotation, "__name__", str(annotation))
    if type_name == "int":
        return int(value)
    if type_name == "float":
        return float(value)
    if type_name == "bool":
        return value.strip().lower() in ("1", "true", "yes", "on")
    return value
