"""Configuration package for runtime settings and startup validation."""

from .logging_setup import config_configure_logging
from .settings import ActuatorSettings, SettingsLoadError, config_load_settings

__all__ = ["ActuatorSettings", "SettingsLoadError", "config_configure_logging", "config_load_settings"]
