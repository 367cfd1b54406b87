"""Tsukumijima weather API constants.

API docs: https://weather.tsukumijima.net/
City codes: https://weather.tsukumijima.net/primary_area.xml
"""

FORECAST_API = "https://weather.tsukumijima.net/api/forecast/city/{city_code}"

# Tokyo
DEFAULT_CITY_CODE = "130010"


def forecast_url(city_code: str) -> str:
    """Return the forecast endpoint for a city code."""
    return FORECAST_API.format(city_code=city_code)
