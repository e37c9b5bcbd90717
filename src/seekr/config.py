"""Centralized configuration for seekr using Pydantic Settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class Settings(BaseSettings):
    """Typed configuration loaded from ``SEEKR_*`` environment variables.

    Provides the default search options used when a caller passes none, plus
    logging and telemetry switches.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEEKR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Search defaults
    default_mode: str | None = Field(
        default=None,
        description="Comparison mode applied when a search passes no options (only 'exact' matches anything)",
    )
    case_sensitive: bool = Field(default=False, description="Default case sensitivity for string comparison")
    deep: bool = Field(default=False, description="Default for dot-path resolution of property names")

    # Logging
    log_level: LogLevel = Field(default="info", description="Root logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    # Telemetry
    metrics_enabled: bool = Field(default=True, description="Record Prometheus search metrics")
    tracing_enabled: bool = Field(default=False, description="Wrap searches in OpenTelemetry spans")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("default_mode", mode="before")
    @classmethod
    def _blank_mode_is_unset(cls, value: object) -> object:
        # An empty env var means "not configured", not the empty-string mode
        if isinstance(value, str) and not value.strip():
            return None
        return value


_settings_holder: dict[str, Settings | None] = {"settings": None}


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    settings = _settings_holder["settings"]
    if settings is None:
        settings = Settings()
        _settings_holder["settings"] = settings
    return settings


def reset_settings() -> None:
    """Drop the cached settings so the next ``get_settings`` call reloads them."""
    _settings_holder["settings"] = None
