"""Weather Dashboard - static weather and news page for e-ink readers.

Architecture::

    datasources/   External APIs (tsukumijima weather JSON, NHK news RSS)
    reference/     Static fallback datasets (sample weather, sample news)
    analysis/      Pure derivation (temperatures, icons, hourly series, chart, summaries)
    renderers/     Pure data → HTML (dashboard page)
    flows/         Prefect orchestration (fetch applies fallbacks, build writes dist/)
    services/      Shared utilities (HTTP session with timeout)

Data flow: datasources → analysis → WeatherReport → renderers → dist/

Extension points, see each package's docstring for step-by-step guides:
  - New data source:   datasources/__init__.py
  - New analysis:      analysis/__init__.py
"""

__version__ = "0.1.0"

from weather_dashboard.config import Settings
from weather_dashboard.schemas import WeatherReport

__all__ = ["Settings", "WeatherReport", "__version__"]
