"""Pure derivation of the dashboard report from decoded source data.

Each module turns datasource models into the derived records the renderer
shows. This is the domain logic layer.

Dependency rule: analysis/ imports from schemas and exceptions only.
It never fetches data or produces HTML.

Modules:
  - temperature: Celsius text -> int (ParseError on empty/null/non-integer)
  - icons: weather description -> pictogram category and glyph
  - hourly: today + tomorrow -> synthetic 3-hourly forecast series
  - chart: hourly series -> vertical chart coordinates
  - daily: daily forecasts -> 3-day summary rows
  - news: drop secondary headlines already in the primary feed
  - report: assemble the WeatherReport from a decoded forecast

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with a pure function over schema models.
2. Rules:
   - No I/O, no HTTP, no Prefect decorators.
   - Handle ParseError locally; never let it escape the analysis layer.
3. Call it from ``report.assemble_report`` or from ``flows/fetch.py``.
4. Re-export in ``__init__.py`` and add tests in ``tests/test_{name}.py``.
"""

from weather_dashboard.analysis.chart import CHART_BOTTOM, CHART_FLAT, CHART_TOP, normalize_chart
from weather_dashboard.analysis.daily import DATE_LABELS, build_daily_summaries, peak_rain_chance
from weather_dashboard.analysis.hourly import (
    ResolvedTemperatures,
    resolve_temperatures,
    synthesize_hourly_series,
)
from weather_dashboard.analysis.icons import IconCategory, classify_icon, icon_glyph
from weather_dashboard.analysis.news import filter_duplicate_news
from weather_dashboard.analysis.report import assemble_report
from weather_dashboard.analysis.temperature import parse_temperature, parse_temperature_or_none

__all__ = [
    "CHART_BOTTOM",
    "CHART_FLAT",
    "CHART_TOP",
    "DATE_LABELS",
    "IconCategory",
    "ResolvedTemperatures",
    "assemble_report",
    "build_daily_summaries",
    "classify_icon",
    "filter_duplicate_news",
    "icon_glyph",
    "normalize_chart",
    "parse_temperature",
    "parse_temperature_or_none",
    "peak_rain_chance",
    "resolve_temperatures",
    "synthesize_hourly_series",
]
