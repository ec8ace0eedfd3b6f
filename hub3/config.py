"""
Decoder configuration using pydantic-settings.

Loads configuration from ``HUB3_*`` environment variables with sensible defaults.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Decoder settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HUB3_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Code page of the report files (Central European Windows)
    encoding: str = "cp1250"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
