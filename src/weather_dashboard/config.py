"""
Application settings.

Values come from environment variables (or a local ``.env`` file). Field names
match the variables case-insensitively, e.g. ``CITY_CODE=270000`` sets
``city_code``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for a dashboard build."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "weather-dashboard"
    app_env: str = "development"
    debug: bool = False

    # Weather source (JMA primary subdivision code, default: Tokyo)
    city_code: str = "130010"
    timezone: str = "Asia/Tokyo"
    http_timeout: float = Field(default=10.0, gt=0)

    news_feed_url: str = "https://www3.nhk.or.jp/rss/news/cat0.xml"
    economy_feed_url: str = "https://www3.nhk.or.jp/rss/news/cat5.xml"

    max_hourly_items: int = Field(default=20, ge=1)
    max_news_items: int = Field(default=5, ge=1)
    # Fetched before duplicates of the main feed are removed
    max_economy_news_items: int = Field(default=10, ge=1)

    site_dir: str = "dist"
    api_port: int = 8000


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
