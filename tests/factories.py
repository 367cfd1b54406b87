"""Builders for test data."""

from __future__ import annotations

from typing import Any
from zoneinfo import ZoneInfo

from weather_dashboard.schemas import DailyForecastSource, RainChance

JST = ZoneInfo("Asia/Tokyo")


def make_day(
    telop: str = "晴れ",
    max_c: str | None = None,
    min_c: str | None = None,
    rain: tuple[str, str, str, str] = ("", "", "", ""),
    wind: str = "",
) -> DailyForecastSource:
    """Build a DailyForecastSource with only the fields a test cares about."""
    return DailyForecastSource(
        telop=telop,
        wind=wind,
        max_celsius=max_c,
        min_celsius=min_c,
        chance_of_rain=RainChance(t00_06=rain[0], t06_12=rain[1], t12_18=rain[2], t18_24=rain[3]),
    )


def make_payload(days: list[dict[str, Any]] | None = None, city: str = "東京") -> dict[str, Any]:
    """Build a tsukumijima API response body."""
    if days is None:
        days = [
            {
                "date": "2025-10-02",
                "dateLabel": "今日",
                "telop": "晴れ",
                "detail": {"weather": "晴れ", "wind": "北の風", "wave": "0.5メートル"},
                "temperature": {
                    "min": {"celsius": "18", "fahrenheit": "64.4"},
                    "max": {"celsius": "28", "fahrenheit": "82.4"},
                },
                "chanceOfRain": {"T00_06": "--%", "T06_12": "0%", "T12_18": "10%", "T18_24": "20%"},
            },
            {
                "date": "2025-10-03",
                "dateLabel": "明日",
                "telop": "曇り",
                "detail": {"weather": "くもり", "wind": "南の風", "wave": "0.5メートル"},
                "temperature": {
                    "min": {"celsius": "19", "fahrenheit": "66.2"},
                    "max": {"celsius": "25", "fahrenheit": "77"},
                },
                "chanceOfRain": {"T00_06": "10%", "T06_12": "20%", "T12_18": "30%", "T18_24": "40%"},
            },
        ]
    return {
        "publicTime": "2025-10-02T11:00:00+09:00",
        "title": f"{city} の天気",
        "forecasts": days,
        "location": {"area": "関東", "prefecture": "東京都", "district": "", "city": city},
    }
