"""Assemble the dashboard report from a decoded weather forecast."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_dashboard.analysis.chart import normalize_chart
from weather_dashboard.analysis.daily import build_daily_summaries
from weather_dashboard.analysis.hourly import (
    MAX_HOURLY_ITEMS,
    resolve_temperatures,
    synthesize_hourly_series,
)
from weather_dashboard.analysis.icons import icon_glyph
from weather_dashboard.schemas import WeatherReport

if TYPE_CHECKING:
    from datetime import datetime

    from weather_dashboard.schemas import WeatherForecast

UPDATE_TIME_FORMAT = "%Y/%m/%d %H:%M"


def assemble_report(
    forecast: WeatherForecast,
    now: datetime,
    *,
    max_hourly_items: int = MAX_HOURLY_ITEMS,
) -> WeatherReport:
    """Build the weather part of the report (news lists are left empty).

    Args:
        forecast: Decoded forecast with at least one day (today).
        now: Local time of the run; its hour selects the hourly window.
        max_hourly_items: Maximum number of hourly samples.
    """
    today = forecast.days[0]
    temps = resolve_temperatures(forecast.days)

    hourly = synthesize_hourly_series(forecast.days, now.hour, max_items=max_hourly_items)

    rain = today.chance_of_rain
    return WeatherReport(
        location=forecast.location,
        temperature=temps.reference,
        min_temp=temps.today_min,
        max_temp=temps.reference,
        feels_like=temps.reference,
        description=today.telop,
        icon=icon_glyph(today.telop),
        wind=today.wind,
        chance_of_rain=[rain.t06_12, rain.t12_18, rain.t18_24],
        update_time=now.strftime(UPDATE_TIME_FORMAT),
        hourly=normalize_chart(hourly),
        daily=build_daily_summaries(forecast.days),
        has_min_temp=temps.has_min_temp,
    )
