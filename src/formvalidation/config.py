"""formvalidation configuration management."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="FORM_VALIDATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Separator between segments of a field path ("address.street")
    path_separator: str = Field(default=".", min_length=1)

    # Key holding record-level messages in a form result
    record_errors_key: str = Field(default="recordErrors", min_length=1)

    # Logging
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the package logger."""
    settings = settings or get_settings()
    logging.getLogger("formvalidation").setLevel(settings.log_level.upper())
