"""SDK configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    SDK settings loaded from environment variables.

    Every field can be overridden with a ``MONO_``-prefixed
    environment variable or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MONO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    secret_key: str = ""

    # Mono API
    base_url: str = "https://api.withmono.com/"
    timeout: float = 30.0

    # Statement polling
    poll_interval: float = 5.0
    poll_max_attempts: int = 60

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
