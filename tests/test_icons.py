"""
Tests for weather icon classification.
"""

from __future__ import annotations

import pytest

from weather_dashboard.analysis.icons import (
    ICON_GLYPHS,
    ICON_RULES,
    IconCategory,
    classify_icon,
    icon_glyph,
)


class TestClassifyIcon:
    """Test the ordered keyword rules."""

    @pytest.mark.parametrize(
        ("description", "expected"),
        [
            ("晴れ", IconCategory.CLEAR),
            ("快晴", IconCategory.CLEAR),
            ("曇り", IconCategory.CLOUDY),
            ("くもり", IconCategory.CLOUDY),
            ("雨", IconCategory.RAIN),
            ("大雨", IconCategory.RAIN),
            ("雪", IconCategory.SNOW),
            ("雷", IconCategory.THUNDER),
            ("霧", IconCategory.FOG),
        ],
    )
    def test_single_conditions(self, description: str, expected: IconCategory) -> None:
        """Single-condition descriptions map to their category."""
        assert classify_icon(description) == expected

    @pytest.mark.parametrize(
        ("description", "expected"),
        [
            ("晴れ時々曇り", IconCategory.CLEAR_THEN_CLOUDY),
            ("晴れのち曇り", IconCategory.CLEAR_THEN_CLOUDY),
            ("晴時々曇", IconCategory.CLEAR_THEN_CLOUDY),
            ("曇り時々晴れ", IconCategory.CLOUDY_THEN_CLEAR),
            ("曇りのち晴れ", IconCategory.CLOUDY_THEN_CLEAR),
            ("曇時々晴", IconCategory.CLOUDY_THEN_CLEAR),
            ("曇り時々雨", IconCategory.CLOUDY_THEN_RAIN),
            ("曇りのち雨", IconCategory.CLOUDY_THEN_RAIN),
            ("曇時々雨", IconCategory.CLOUDY_THEN_RAIN),
        ],
    )
    def test_compound_phrases_win_over_single_keywords(
        self, description: str, expected: IconCategory
    ) -> None:
        """Compound phrases are not swallowed by the 晴/曇 rules."""
        assert classify_icon(description) == expected

    def test_compound_rules_come_first(self) -> None:
        """Every compound rule precedes every single-condition rule."""
        categories = [category for _, category in ICON_RULES]
        compound = {
            IconCategory.CLEAR_THEN_CLOUDY,
            IconCategory.CLOUDY_THEN_CLEAR,
            IconCategory.CLOUDY_THEN_RAIN,
        }
        last_compound = max(i for i, c in enumerate(categories) if c in compound)
        first_single = min(i for i, c in enumerate(categories) if c not in compound)
        assert last_compound < first_single

    @pytest.mark.parametrize("description", ["", "sunny", "不明"])
    def test_unknown_is_default(self, description: str) -> None:
        """Descriptions without a keyword fall back to unknown."""
        assert classify_icon(description) == IconCategory.UNKNOWN

    def test_first_matching_rule_wins(self) -> None:
        """A description matching several single rules takes the earliest one."""
        # 晴 (clear) is listed before 雨 (rain)
        assert classify_icon("晴時々雨") == IconCategory.CLEAR


class TestIconGlyph:
    """Test glyph lookup."""

    def test_every_category_has_a_glyph(self) -> None:
        assert set(ICON_GLYPHS) == set(IconCategory)

    def test_clear_glyph(self) -> None:
        assert icon_glyph("晴れ") == "\u2600\ufe0f"

    def test_unknown_glyph(self) -> None:
        assert icon_glyph("???") == "\U0001f321\ufe0f"

    def test_compound_glyph(self) -> None:
        assert icon_glyph("曇り時々晴れ") == "\u26c5"
