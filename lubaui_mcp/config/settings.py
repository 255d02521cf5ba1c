"""
Settings - Application configuration using Pydantic Settings.

Loads from environment variables and .env files.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Catalog: None means the JSON files bundled with the package
    data_dir: Path | None = None

    # Search
    search_default_limit: int = 10

    # Logging
    log_level: str = "INFO"

    # MCP
    server_name: str = "lubaui"

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    api_debug: bool = False
    rate_limit_rpm: int = 60

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
