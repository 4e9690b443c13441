"""
Configuration management for readingtime using Pydantic.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import AliasChoices, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Setup Logging ---
log = logging.getLogger(__name__)

DEFAULT_WPM = 225.0
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_ALIASES = {"TRACE": "DEBUG", "WARN": "WARNING", "OFF": "CRITICAL"}

# --- Nested Configuration Models ---


class FetchConfig(BaseModel):
    """Page fetch configuration."""

    timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout in seconds.")
    user_agent: str = Field(
        default="readingtime/0.1 (+https://github.com/readingtime/readingtime)",
        description="User-Agent string for HTTP requests.",
    )


class ExtractionSettings(BaseModel):
    """Configuration for the text extraction strategy."""

    strategy: Literal["visible_text", "readability"] = Field(
        default="visible_text",
        description="Extractor used to find the readable text of a page.",
    )


class TelegramConfig(BaseModel):
    """Telegram Bot API configuration."""

    api_url: str = Field(default="https://api.telegram.org", description="Bot API base URL.")
    poll_timeout: int = Field(default=30, ge=0, description="Long-poll timeout for getUpdates in seconds.")


class MonitoringConfig(BaseModel):
    """Configuration for logging and metrics."""

    log_file: str | None = Field(
        default=None,
        description="Path to log file. If None, logs to console.",
    )
    json_logs: bool = Field(default=False, description="Render console logs as JSON.")
    prometheus_port: int | None = Field(
        default=None,
        description="Port for Prometheus metrics exporter. None to disable.",
    )

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Settings(BaseSettings):
    """Process configuration.

    ``WPM``, ``BOT_TOKEN`` and ``LOG_LEVEL`` are read from the environment
    as-is; everything else uses the ``READINGTIME_`` prefix.
    """

    wpm: float = Field(
        default=DEFAULT_WPM,
        validation_alias=AliasChoices("wpm", "readingtime_wpm"),
        description="Reading speed in words per minute.",
    )
    bot_token: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("bot_token", "readingtime_bot_token"),
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        validation_alias=AliasChoices("log_level", "readingtime_log_level"),
    )
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    telegram: TelegramConfig = Field(default_factory=TelegramConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(
        env_prefix="READINGTIME_",
        env_nested_delimiter="__",
        case_sensitive=False,
        populate_by_name=True,
    )

    @field_validator("wpm", mode="before")
    @classmethod
    def fallback_wpm(cls, v: Any) -> float:
        """Fall back to the default reading speed on unusable values."""
        try:
            wpm = float(v)
        except (TypeError, ValueError):
            log.warning("Error in WPM parsing (%r), defaulting to %s", v, DEFAULT_WPM)
            return DEFAULT_WPM
        if not math.isfinite(wpm) or wpm <= 0:
            log.warning("WPM must be a positive number (got %r), defaulting to %s", v, DEFAULT_WPM)
            return DEFAULT_WPM
        return wpm

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Map env_logger-style levels onto logging levels, warning on unknown ones."""
        level = str(v).strip().upper()
        level = LOG_LEVEL_ALIASES.get(level, level)
        if level not in logging.getLevelNamesMapping():
            log.warning("Unknown log level %r, defaulting to %s", v, DEFAULT_LOG_LEVEL)
            return DEFAULT_LOG_LEVEL
        return level

    @classmethod
    def from_yaml(cls, path: Path) -> Settings:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls()
        return cls(**yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    for path in (current_dir / "config.yaml", current_dir / "config.yml"):
        if path.exists():
            return path
    return None


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from ``path``, a discovered config file, or the environment."""
    config_path = path or find_config_file()
    if config_path:
        log.info("Loading configuration from: %s", config_path)
        return Settings.from_yaml(config_path)
    return Settings()
