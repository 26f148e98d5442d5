"""Configuration module for Subtoggle."""

from .paths import SubtogglePaths
from .settings import DEFAULTS, ConfigError, DashboardSettings, Settings

__all__ = [
    "Settings",
    "DashboardSettings",
    "SubtogglePaths",
    "ConfigError",
    "DEFAULTS",
]
