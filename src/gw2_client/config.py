"""
Configuration management for the GW2 API client.

Loads settings from environment variables and config file, with sensible defaults.
"""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GW2_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_timeout: float = Field(default=30.0, description="HTTP request timeout in seconds")
    base_url: str = Field(default="https://api.guildwars2.com", description="API host")
    render_base_url: str = Field(
        default="https://render.guildwars2.com", description="Render service host"
    )
    default_language: str = Field(default="en", description="Two-letter language code")
    log_level: str = Field(default="INFO", description="Logging level")


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    global _settings
    _settings = Settings()
    return _settings


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
