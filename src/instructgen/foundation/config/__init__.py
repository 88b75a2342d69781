"""Configuration management using pydantic-settings."""

from .settings import (
    InstructgenSettings,
    LoggingSettings,
    RenderSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "InstructgenSettings",
    "LoggingSettings",
    "RenderSettings",
    "clear_settings_cache",
    "get_settings",
]
