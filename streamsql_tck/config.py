"""
Configuration settings for streamsql-tck.

Uses Pydantic Settings to read environment variables (or a local `.env`) that
control logging and which fixture catalog the CLI uses by default.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = Field("WARNING", alias="TCK_LOG_LEVEL")
    json_logs: bool = Field(False, alias="TCK_JSON_LOGS")

    # Catalogs
    default_catalog: str = Field("basic", alias="TCK_DEFAULT_CATALOG")

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
