"""
Configuration settings for the Employee Locator.

Uses Pydantic Settings to load environment variables for logging, loader
behaviour (timeouts, retries, encodings) and the record date format.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Network loader
    request_timeout_seconds: float = Field(30.0, gt=0, alias="REQUEST_TIMEOUT_SECONDS")
    network_retries: int = Field(0, ge=0, alias="NETWORK_RETRIES")

    # File loader / parser
    file_encoding: str = Field("utf-8", alias="FILE_ENCODING")
    date_format: str = Field("%Y-%m-%d", alias="DATE_FORMAT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
