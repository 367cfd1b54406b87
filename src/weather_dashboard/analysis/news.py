"""Headline de-duplication across feeds."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from weather_dashboard.schemas import NewsItem

MAX_NEWS_ITEMS = 5


def filter_duplicate_news(
    secondary: Iterable[NewsItem],
    primary: Iterable[NewsItem],
    max_items: int = MAX_NEWS_ITEMS,
) -> list[NewsItem]:
    """Drop secondary items whose title already appears in the primary list.

    Titles are compared for exact equality. Order is preserved and the scan
    stops once ``max_items`` items are collected.
    """
    primary_titles = {item.title for item in primary}
    filtered: list[NewsItem] = []
    for item in secondary:
        if item.title in primary_titles:
            continue
        filtered.append(item)
        if len(filtered) >= max_items:
            break
    return filtered
