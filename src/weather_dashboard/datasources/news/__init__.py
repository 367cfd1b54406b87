"""NHK news RSS data source.

Public API:
  - feeds: fetch_feed, decode_feed, format_pub_date
  - client: feed URLs, per-feed item limits
"""

from weather_dashboard.datasources.news.client import (
    ECONOMY_FEED_URL,
    MAX_ECONOMY_NEWS_ITEMS,
    MAX_NEWS_ITEMS,
    NEWS_FEED_URL,
)
from weather_dashboard.datasources.news.feeds import decode_feed, fetch_feed, format_pub_date

__all__ = [
    "ECONOMY_FEED_URL",
    "MAX_ECONOMY_NEWS_ITEMS",
    "MAX_NEWS_ITEMS",
    "NEWS_FEED_URL",
    "decode_feed",
    "fetch_feed",
    "format_pub_date",
]
