"""Shared fixtures for the dashboard tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

import pytest

from tests.factories import JST, make_day
from weather_dashboard.config import get_settings
from weather_dashboard.schemas import WeatherForecast


@pytest.fixture
def tokyo_forecast() -> WeatherForecast:
    """Today 28/18 sunny, tomorrow 25/19 cloudy."""
    return WeatherForecast(
        location="東京",
        days=[
            make_day("晴れ", max_c="28", min_c="18", rain=("-", "0%", "10%", "20%"), wind="北の風"),
            make_day("曇り", max_c="25", min_c="19", rain=("10%", "20%", "30%", "40%")),
            make_day("雨", max_c="22", min_c="17", rain=("50%", "60%", "70%", "50%")),
        ],
    )


@pytest.fixture
def evening() -> datetime:
    """2025-10-02 20:30 in Tokyo."""
    return datetime(2025, 10, 2, 20, 30, tzinfo=JST)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop cached settings so env changes made by a test are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
