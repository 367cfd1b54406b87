"""Vertical chart coordinates for the hourly temperature line.

Coordinates are percentages of the chart height measured from the top, as
used by the SVG in ``templates/index.html.j2``: the warmest sample sits at
``CHART_TOP`` and the coldest at ``CHART_BOTTOM``.
"""

from __future__ import annotations

from weather_dashboard.schemas import HourlySample

CHART_BOTTOM = 75
CHART_TOP = 20
# Flat series are drawn across the middle
CHART_FLAT = (CHART_BOTTOM + CHART_TOP) // 2


def chart_coordinate(temp: int, low: int, high: int) -> int:
    """Map ``temp`` in ``[low, high]`` onto ``[CHART_BOTTOM, CHART_TOP]``."""
    if high == low:
        return CHART_FLAT
    span = CHART_BOTTOM - CHART_TOP
    # round() takes halves to even (16.5 -> 16, 5.5 -> 6), not truncation
    return CHART_BOTTOM - round((temp - low) * span / (high - low))


def normalize_chart(samples: list[HourlySample]) -> list[HourlySample]:
    """Return copies of ``samples`` with ``chart_y`` set.

    The range is taken over the whole series, so the warmest sample always
    gets the smallest coordinate.
    """
    if not samples:
        return []
    temps = [s.temp for s in samples]
    low, high = min(temps), max(temps)
    return [
        s.model_copy(update={"chart_y": chart_coordinate(s.temp, low, high)}) for s in samples
    ]
