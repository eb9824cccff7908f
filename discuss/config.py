"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ThreadSettings(BaseModel):
    """Comment thread configuration."""

    # Starting z-index for a freshly loaded post's threads
    # Each new top-level comment stacks one above the previous top
    default_z_index: int = Field(default=100000, ge=0)


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using __ for nested values:

        ENVIRONMENT=production
        THREADS__DEFAULT_Z_INDEX=5000
        OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows THREADS__DEFAULT_Z_INDEX syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    threads: ThreadSettings = ThreadSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
