"""Tsukumijima weather data source.

Fetches the JMA daily forecast (today, tomorrow, day after) as JSON from
weather.tsukumijima.net (free, no API key).

Public API:
  - forecast: fetch_forecast, decode_forecast
  - client: API URL, default city code
"""

from weather_dashboard.datasources.weather.client import DEFAULT_CITY_CODE, FORECAST_API
from weather_dashboard.datasources.weather.forecast import decode_forecast, fetch_forecast

__all__ = [
    "DEFAULT_CITY_CODE",
    "FORECAST_API",
    "decode_forecast",
    "fetch_forecast",
]
