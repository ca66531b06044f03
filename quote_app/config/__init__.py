"""Configuration defaults, loading and validation."""

from .defaults import AppConfig, get_default_config
from .loader import ConfigLoader, build_config
from .validation import ConfigValidator, ValidationError

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
    "build_config",
    "get_default_config",
]
