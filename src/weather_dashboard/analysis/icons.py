"""Weather description -> pictogram classification.

Rules are an ordered list evaluated top to bottom; the first rule with any
keyword contained in the description wins. Compound phrases come before the
single-condition rules, otherwise "晴れ時々曇り" would match 晴 and be shown
as plain clear weather.
"""

from __future__ import annotations

from enum import StrEnum


class IconCategory(StrEnum):
    """Pictogram categories shown on the dashboard."""

    CLEAR = "clear"
    CLOUDY = "cloudy"
    RAIN = "rain"
    SNOW = "snow"
    THUNDER = "thunder"
    FOG = "fog"
    CLEAR_THEN_CLOUDY = "clear-then-cloudy"
    CLOUDY_THEN_CLEAR = "cloudy-then-clear"
    CLOUDY_THEN_RAIN = "cloudy-then-rain"
    UNKNOWN = "unknown"


ICON_GLYPHS: dict[IconCategory, str] = {
    IconCategory.CLEAR: "\u2600\ufe0f",
    IconCategory.CLOUDY: "\u2601\ufe0f",
    IconCategory.RAIN: "\u2614",
    IconCategory.SNOW: "\u26c4",
    IconCategory.THUNDER: "\u26a1",
    IconCategory.FOG: "\U0001f32b\ufe0f",
    IconCategory.CLEAR_THEN_CLOUDY: "\U0001f324\ufe0f",
    IconCategory.CLOUDY_THEN_CLEAR: "\u26c5",
    IconCategory.CLOUDY_THEN_RAIN: "\U0001f327\ufe0f",
    IconCategory.UNKNOWN: "\U0001f321\ufe0f",
}

ICON_RULES: tuple[tuple[tuple[str, ...], IconCategory], ...] = (
    (("晴れ時々曇り", "晴れのち曇り", "晴時々曇", "晴のち曇"), IconCategory.CLEAR_THEN_CLOUDY),
    (("曇り時々晴れ", "曇りのち晴れ", "曇時々晴", "曇のち晴"), IconCategory.CLOUDY_THEN_CLEAR),
    (("曇り時々雨", "曇りのち雨", "曇時々雨", "曇のち雨"), IconCategory.CLOUDY_THEN_RAIN),
    (("晴", "快晴"), IconCategory.CLEAR),
    (("曇", "くもり"), IconCategory.CLOUDY),
    (("雨", "雨天", "大雨", "豪雨"), IconCategory.RAIN),
    (("雪", "大雪"), IconCategory.SNOW),
    (("雷", "雷雨"), IconCategory.THUNDER),
    (("霧",), IconCategory.FOG),
)


def classify_icon(description: str) -> IconCategory:
    """Return the pictogram category for a weather description."""
    for keywords, category in ICON_RULES:
        if any(keyword in description for keyword in keywords):
            return category
    return IconCategory.UNKNOWN


def icon_glyph(description: str) -> str:
    """Return the emoji shown for a weather description."""
    return ICON_GLYPHS[classify_icon(description)]
