"""Configuration management for tweenkit."""

from tweenkit.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    load_transition_settings,
)
from tweenkit.core.config.models import AppConfig, ConfigBase, LoggingConfig

__all__ = [
    # Loaders
    "detect_format",
    "load_config",
    "load_app_config",
    "load_transition_settings",
    "configure_logging",
    # Models
    "AppConfig",
    "ConfigBase",
    "LoggingConfig",
]
