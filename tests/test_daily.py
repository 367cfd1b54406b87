"""
Tests for the 3-day summary rows.
"""

from __future__ import annotations

import pytest

from tests.factories import make_day
from weather_dashboard.analysis.daily import DATE_LABELS, build_daily_summaries, peak_rain_chance


class TestPeakRainChance:
    """Test peak rain probability selection."""

    def test_picks_highest(self) -> None:
        assert peak_rain_chance(["10%", "-", "30%", "20%"]) == "30%"

    @pytest.mark.parametrize(
        "buckets",
        [["", "", "", ""], ["-", "-", "-", "-"], ["", "-", "", "-"], []],
    )
    def test_nothing_usable(self, buckets: list[str]) -> None:
        assert peak_rain_chance(buckets) == "0%"

    def test_all_zero(self) -> None:
        assert peak_rain_chance(["0%", "0%", "0%", "0%"]) == "0%"

    def test_first_wins_on_ties(self) -> None:
        """Only a strictly larger value replaces the current peak."""
        assert peak_rain_chance(["40", "40%", "10%", ""]) == "40"

    def test_keeps_original_text(self) -> None:
        assert peak_rain_chance(["", "", "", "70"]) == "70"

    def test_ignores_unparseable(self) -> None:
        """The API's ``--%`` placeholder for passed windows is skipped."""
        assert peak_rain_chance(["--%", "abc", "20%", "5%"]) == "20%"


class TestBuildDailySummaries:
    """Test summary rows."""

    def test_three_days(self) -> None:
        days = [
            make_day("晴れ", max_c="28", min_c="18", rain=("-", "0%", "10%", "20%")),
            make_day("曇り", max_c="25", min_c="19", rain=("10%", "20%", "30%", "40%")),
            make_day("雨", max_c="22", min_c="17", rain=("50%", "60%", "70%", "50%")),
        ]
        rows = build_daily_summaries(days)
        assert [r.date for r in rows] == list(DATE_LABELS)
        assert rows[0].max_temp == 28
        assert rows[0].min_temp == 18
        assert rows[0].rain_chance == "20%"
        assert rows[0].icon == "☀️"
        assert rows[1].description == "曇り"
        assert rows[2].rain_chance == "70%"

    def test_at_most_three_rows(self) -> None:
        rows = build_daily_summaries([make_day()] * 5)
        assert len(rows) == 3

    def test_fewer_days_than_labels(self) -> None:
        rows = build_daily_summaries([make_day("雪")])
        assert len(rows) == 1
        assert rows[0].date == "今日"

    def test_labels_are_positional(self) -> None:
        rows = build_daily_summaries([make_day(), make_day()], labels=("a", "b", "c"))
        assert [r.date for r in rows] == ["a", "b"]

    def test_missing_values_are_zero_without_fallback(self) -> None:
        """A missing max is 0 even when another day has one."""
        rows = build_daily_summaries(
            [make_day(max_c="", min_c="null"), make_day(max_c="30", min_c="20")]
        )
        assert rows[0].max_temp == 0
        assert rows[0].min_temp == 0
        assert rows[1].max_temp == 30

    def test_no_rain_data(self) -> None:
        rows = build_daily_summaries([make_day()])
        assert rows[0].rain_chance == "0%"
