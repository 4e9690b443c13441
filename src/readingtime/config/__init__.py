"""Configuration for readingtime."""

from .config import (
    DEFAULT_WPM,
    ExtractionSettings,
    FetchConfig,
    MonitoringConfig,
    Settings,
    TelegramConfig,
    find_config_file,
    load_settings,
)

__all__ = [
    "DEFAULT_WPM",
    "ExtractionSettings",
    "FetchConfig",
    "MonitoringConfig",
    "Settings",
    "TelegramConfig",
    "find_config_file",
    "load_settings",
]
