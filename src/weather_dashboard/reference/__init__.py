"""Static fallback data.

Datasets substituted when a live source is unavailable. Everything here is
immutable and built once at import time.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from weather_dashboard.reference.samples import SAMPLE_NEWS as SAMPLE_NEWS
from weather_dashboard.reference.samples import sample_weather_report as sample_weather_report
