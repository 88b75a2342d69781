"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from instructgen.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'
    >>> settings.render.custom_instructions_enabled
    False

    # Or with environment variables:
    # INSTRUCTGEN_LOG_LEVEL=DEBUG
    # INSTRUCTGEN_RENDER_HOST=gemini.google.com
    # INSTRUCTGEN_RENDER_CUSTOM_INSTRUCTIONS="Answer briefly."
    # INSTRUCTGEN_RENDER_CUSTOM_INSTRUCTIONS_ENABLED=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="INSTRUCTGEN_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class RenderSettings(BaseSettings):
    """Defaults for the inputs a caller may leave to configuration."""

    model_config = SettingsConfigDict(
        env_prefix="INSTRUCTGEN_RENDER_",
        extra="ignore",
    )

    host: str = Field(default="", description="Host identifier used for platform fragment selection")
    custom_instructions: str = Field(default="", description="User-authored text appended to the document")
    custom_instructions_enabled: bool = False

    @computed_field
    @property
    def has_custom_instructions(self) -> bool:
        """Whether the custom instructions block would be rendered."""
        return self.custom_instructions_enabled and bool(self.custom_instructions.strip())


class InstructgenSettings(BaseSettings):
    """Root settings.

    Loads configuration from environment variables with INSTRUCTGEN_ prefix.

    Example environment variables:
        INSTRUCTGEN_DEBUG=true
        INSTRUCTGEN_LOG_FORMAT=json
        INSTRUCTGEN_RENDER_HOST=chatgpt.com
    """

    model_config = SettingsConfigDict(
        env_prefix="INSTRUCTGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # Nested settings (loaded with INSTRUCTGEN_LOG_, INSTRUCTGEN_RENDER_)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> InstructgenSettings:
    """Get the global settings instance (cached)."""
    return InstructgenSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
