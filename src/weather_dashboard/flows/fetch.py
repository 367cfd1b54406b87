"""
Prefect flow for fetching sources and assembling the dashboard report.

Every source is fetched once, in order (weather, main news, economy news).
A failing source never aborts the run:

- weather fails: the whole report is replaced by sample data
- a news feed fails: only that feed is replaced by the sample news

Run locally:
    python -m weather_dashboard.flows.fetch
"""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from prefect import flow, task

from weather_dashboard.analysis import assemble_report, filter_duplicate_news
from weather_dashboard.config import get_settings
from weather_dashboard.datasources.news import fetch_feed
from weather_dashboard.datasources.weather import fetch_forecast
from weather_dashboard.exceptions import DecodeError, FetchError
from weather_dashboard.reference import SAMPLE_NEWS, sample_weather_report
from weather_dashboard.schemas import NewsItem, WeatherForecast, WeatherReport


@task(name="fetch-weather")
def fetch_weather(city_code: str, timeout: float) -> WeatherForecast:
    """Fetch the daily forecast for a city."""
    return fetch_forecast(city_code, timeout=timeout)


@task(name="fetch-news")
def fetch_news(url: str, limit: int, timeout: float) -> list[NewsItem]:
    """Fetch the main headlines."""
    return fetch_feed(url, limit, timeout=timeout)


@task(name="fetch-economy-news")
def fetch_economy_news(url: str, limit: int, timeout: float) -> list[NewsItem]:
    """Fetch the economy headlines (before de-duplication)."""
    return fetch_feed(url, limit, timeout=timeout)


@flow(name="fetch-report", log_prints=True)
def fetch_report(now: datetime | None = None) -> WeatherReport:
    """
    Fetch all sources and assemble the dashboard report.

    Args:
        now: Time of the run; defaults to the current time in the configured
            timezone. Its hour decides which hourly slots are shown.
    """
    settings = get_settings()
    if now is None:
        now = datetime.now(ZoneInfo(settings.timezone))

    # --- Weather ---
    print(f"Fetching weather for city {settings.city_code}...")
    try:
        forecast = fetch_weather(settings.city_code, settings.http_timeout)
    except (FetchError, DecodeError) as exc:
        print(f"Warning: weather fetch failed ({exc}). Using sample data.")
        return sample_weather_report(now)

    report = assemble_report(forecast, now, max_hourly_items=settings.max_hourly_items)
    print(f"Weather for {report.location}: {len(report.hourly)} hourly, {len(report.daily)} days")

    # --- Main news ---
    print("Fetching news...")
    try:
        news = fetch_news(settings.news_feed_url, settings.max_news_items, settings.http_timeout)
    except (FetchError, DecodeError) as exc:
        print(f"Warning: news fetch failed ({exc}). Using sample news.")
        news = list(SAMPLE_NEWS)

    # --- Economy news ---
    print("Fetching economy news...")
    try:
        economy_raw = fetch_economy_news(
            settings.economy_feed_url, settings.max_economy_news_items, settings.http_timeout
        )
    except (FetchError, DecodeError) as exc:
        print(f"Warning: economy news fetch failed ({exc}). Using sample news.")
        economy_news = list(SAMPLE_NEWS)
    else:
        economy_news = filter_duplicate_news(economy_raw, news, settings.max_news_items)

    return report.model_copy(update={"news": news, "economy_news": economy_news})


if __name__ == "__main__":
    result = fetch_report()
    print(f"Flow complete: {result.location}, fallback={result.is_using_fallback_data}")
