"""3-day forecast table rows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_dashboard.analysis.icons import icon_glyph
from weather_dashboard.analysis.temperature import parse_temperature_or_none
from weather_dashboard.schemas import DailySummary

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from weather_dashboard.schemas import DailyForecastSource

# Today / tomorrow / the day after; assigned by position, not by date
DATE_LABELS: tuple[str, str, str] = ("今日", "明日", "明後日")

NO_RAIN = "0%"
NOT_APPLICABLE = "-"


def peak_rain_chance(buckets: Iterable[str]) -> str:
    """Return the highest rain probability among the 6-hour windows.

    Empty and ``"-"`` windows are ignored. The original text (with its ``%``)
    of the first strictly highest window is returned; ``"0%"`` when no window
    is usable or none is above zero.
    """
    peak = NO_RAIN
    peak_percent = 0
    for bucket in buckets:
        if bucket in ("", NOT_APPLICABLE):
            continue
        digits = bucket.removesuffix("%")
        try:
            percent = int(digits)
        except ValueError:
            continue
        if percent > peak_percent:
            peak_percent = percent
            peak = bucket
    return peak


def build_daily_summaries(
    days: Sequence[DailyForecastSource],
    labels: Sequence[str] = DATE_LABELS,
) -> list[DailySummary]:
    """Summarize up to ``len(labels)`` days, one row per day.

    Max and min are parsed independently; a missing value shows as 0 and is
    not borrowed from another day.
    """
    return [
        DailySummary(
            date=label,
            icon=icon_glyph(day.telop),
            description=day.telop,
            max_temp=parse_temperature_or_none(day.max_celsius) or 0,
            min_temp=parse_temperature_or_none(day.min_celsius) or 0,
            rain_chance=peak_rain_chance(day.chance_of_rain.buckets),
        )
        for label, day in zip(labels, days)
    ]
