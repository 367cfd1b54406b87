"""Daily forecast from the tsukumijima weather API."""

from __future__ import annotations

from typing import Any

import requests
from pydantic import ValidationError

from weather_dashboard.datasources.weather.client import DEFAULT_CITY_CODE, forecast_url
from weather_dashboard.exceptions import DecodeError, FetchError
from weather_dashboard.schemas import DailyForecastSource, RainChance, WeatherForecast
from weather_dashboard.services.http import DEFAULT_TIMEOUT, session


def fetch_forecast(
    city_code: str = DEFAULT_CITY_CODE,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> WeatherForecast:
    """
    Fetch and decode the daily forecast for a city.

    Args:
        city_code: JMA primary subdivision code (default: Tokyo).
        timeout: Request timeout in seconds.

    Raises:
        FetchError: on network errors, timeouts and non-2xx responses.
        DecodeError: if the body is not a forecast we can read.
    """
    url = forecast_url(city_code)
    try:
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"weather API request failed ({url}): {exc}") from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        raise DecodeError(f"weather API returned invalid JSON: {exc}") from exc
    return decode_forecast(payload)


def _celsius(temperature: dict[str, Any] | None, key: str) -> str | None:
    """Pull ``temperature[key].celsius``; the source nulls either level."""
    entry = (temperature or {}).get(key) or {}
    value: str | None = entry.get("celsius")
    return value


def _decode_day(raw: dict[str, Any]) -> DailyForecastSource:
    temperature = raw.get("temperature")
    return DailyForecastSource(
        date=raw.get("date") or "",
        date_label=raw.get("dateLabel") or "",
        telop=raw.get("telop") or "",
        wind=(raw.get("detail") or {}).get("wind") or "",
        min_celsius=_celsius(temperature, "min"),
        max_celsius=_celsius(temperature, "max"),
        chance_of_rain=RainChance.model_validate(raw.get("chanceOfRain") or {}),
    )


def decode_forecast(payload: Any) -> WeatherForecast:
    """
    Decode a forecast API response.

    Args:
        payload: Parsed JSON body.

    Returns:
        WeatherForecast with days ordered as the API lists them (today first).

    Raises:
        DecodeError: if the payload has no forecasts or an unexpected shape.
    """
    try:
        forecasts = payload["forecasts"]
        if not isinstance(forecasts, list) or not forecasts:
            raise DecodeError("weather API response has no forecasts")
        days = [_decode_day(raw) for raw in forecasts]
        location = payload.get("location") or {}
        return WeatherForecast(
            location=location.get("city") or "",
            public_time=payload.get("publicTime") or "",
            days=days,
        )
    except (KeyError, TypeError, AttributeError, ValidationError) as exc:
        raise DecodeError(f"unexpected weather API response: {exc}") from exc
