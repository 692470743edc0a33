"""Configuration management using pydantic-settings.

Supports environment variables and .env file loading. The fetcher's
User-Agent and proxy endpoint are constants in ``feedloom.sources.fetcher``.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        env_prefix="FEEDLOOM_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "feedloom"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False  # Set True in production for structured logs

    # Ingestion
    feed_parse_timeout: float = Field(
        default=15.0,
        gt=0,
        description="Deadline in seconds for a whole fetch-and-parse call",
    )
    http_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Per-request socket timeout for the HTTP client",
    )


settings = Settings()
