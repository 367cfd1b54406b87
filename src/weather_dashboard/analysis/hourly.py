"""Synthetic 3-hourly forecast from a daily forecast.

The weather source only gives min/max temperatures and four 6-hour rain
windows per day. The hourly series walks a fixed lattice of 3-hour offsets
(0..72h from midnight today) and fills each future point from either today's
or tomorrow's figures. Temperatures within a day follow fixed offsets from
the daily values; they approximate the usual daily curve and are not a
physical model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from weather_dashboard.analysis.icons import icon_glyph
from weather_dashboard.analysis.temperature import parse_temperature_or_none
from weather_dashboard.schemas import HourlySample

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weather_dashboard.schemas import DailyForecastSource, RainChance

LATTICE_STEP_HOURS = 3
LATTICE_END_HOURS = 72
MAX_HOURLY_ITEMS = 20


@dataclass(frozen=True)
class ResolvedTemperatures:
    """Temperatures the hourly series and the report header are built from."""

    reference: int
    today_min: int
    has_min_temp: bool
    tomorrow_min: int
    tomorrow_max: int


@dataclass(frozen=True)
class DayProfile:
    """What a lattice point inherits from the day it falls in."""

    telop: str
    rain: RainChance
    # Temperature for each 6-hour window: 00-06, 06-12, 12-18, 18-24
    temps: tuple[int, int, int, int]

    @classmethod
    def today(cls, day: DailyForecastSource, reference: int) -> DayProfile:
        """Cool night, flat daytime at the reference, slightly cooler evening."""
        return cls(
            telop=day.telop,
            rain=day.chance_of_rain,
            temps=(reference - 4, reference, reference, reference - 2),
        )

    @classmethod
    def tomorrow(cls, day: DailyForecastSource, low: int, high: int) -> DayProfile:
        """Minimum overnight, maximum in the morning, easing off afterwards."""
        return cls(
            telop=day.telop,
            rain=day.chance_of_rain,
            temps=(low, high, high - 2, low + 2),
        )

    def sample(self, offset: int) -> HourlySample:
        """Build the hourly sample for a lattice offset (hours from today 00:00)."""
        hour = offset % 24
        return HourlySample(
            time=f"{hour:02d}:00",
            temp=self.temps[hour // 6],
            desc=self.telop,
            icon=icon_glyph(self.telop),
            rain_chance=self.rain.bucket_for_hour(hour),
        )


def resolve_temperatures(days: Sequence[DailyForecastSource]) -> ResolvedTemperatures:
    """Resolve the reference, minimum and tomorrow temperatures.

    The reference temperature is today's maximum, or tomorrow's maximum when
    today's is missing (the source nulls it late in the day). Today's minimum
    never borrows from tomorrow; ``has_min_temp`` records whether it parsed.
    Anything else that is missing resolves to 0.
    """
    today = days[0] if days else None
    tomorrow = days[1] if len(days) >= 2 else None

    reference = parse_temperature_or_none(today.max_celsius) if today else None
    if reference is None and tomorrow is not None:
        reference = parse_temperature_or_none(tomorrow.max_celsius)

    today_min = parse_temperature_or_none(today.min_celsius) if today else None

    tomorrow_min = tomorrow_max = None
    if tomorrow is not None:
        tomorrow_min = parse_temperature_or_none(tomorrow.min_celsius)
        tomorrow_max = parse_temperature_or_none(tomorrow.max_celsius)

    return ResolvedTemperatures(
        reference=reference or 0,
        today_min=today_min or 0,
        has_min_temp=today_min is not None,
        tomorrow_min=tomorrow_min or 0,
        tomorrow_max=tomorrow_max or 0,
    )


def forecast_lattice() -> list[int]:
    """Hour offsets from today 00:00 at which samples may be produced."""
    return list(range(0, LATTICE_END_HOURS + 1, LATTICE_STEP_HOURS))


def synthesize_hourly_series(
    days: Sequence[DailyForecastSource],
    current_hour: int,
    max_items: int = MAX_HOURLY_ITEMS,
) -> list[HourlySample]:
    """Build the hourly forecast from now on, earliest first.

    Only lattice offsets strictly after ``current_hour`` are used, so the
    slot of the current hour itself is skipped. Offsets 0-23 come from
    today's forecast, everything later from tomorrow's.

    Args:
        days: Daily forecasts, today first. Fewer than two gives no samples.
        current_hour: Local hour of day (0-23).
        max_items: Maximum number of samples.
    """
    if len(days) < 2:
        return []

    temps = resolve_temperatures(days)
    today = DayProfile.today(days[0], temps.reference)
    tomorrow = DayProfile.tomorrow(days[1], temps.tomorrow_min, temps.tomorrow_max)

    samples: list[HourlySample] = []
    for offset in forecast_lattice():
        if offset <= current_hour:
            continue
        profile = tomorrow if offset >= 24 else today
        samples.append(profile.sample(offset))
        if len(samples) >= max_items:
            break
    return samples
