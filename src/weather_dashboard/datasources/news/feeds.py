"""RSS headline feeds."""

from __future__ import annotations

from email.utils import parsedate_to_datetime

import feedparser  # type: ignore[import-untyped]
import requests

from weather_dashboard.datasources.news.client import MAX_NEWS_ITEMS, PUB_DATE_FORMAT
from weather_dashboard.exceptions import DecodeError, FetchError
from weather_dashboard.schemas import NewsItem
from weather_dashboard.services.http import DEFAULT_TIMEOUT, session


def format_pub_date(raw: str) -> str:
    """Reformat an RFC 822 date (``Tue, 30 Sep 2025 12:19:00 +0900``) as ``09/30 12:19``.

    The time is shown in the offset the feed used. Unparseable text is
    returned unchanged.
    """
    try:
        published = parsedate_to_datetime(raw)
    except (TypeError, ValueError, IndexError):
        return raw
    return published.strftime(PUB_DATE_FORMAT)


def decode_feed(content: bytes, limit: int = MAX_NEWS_ITEMS) -> list[NewsItem]:
    """
    Parse an RSS document into at most ``limit`` headlines, in feed order.

    Raises:
        DecodeError: if the document is malformed and yields no entries, or
            is not a feed at all (e.g. an HTML error page).
    """
    feed = feedparser.parse(content)
    if feed.bozo and not feed.entries:
        raise DecodeError(f"malformed news feed: {feed.get('bozo_exception')}")
    if not feed.version:
        raise DecodeError("response is not an RSS or Atom feed")

    items: list[NewsItem] = []
    for entry in feed.entries[:limit]:
        items.append(
            NewsItem(
                title=entry.get("title", ""),
                link=entry.get("link", ""),
                description=entry.get("summary", ""),
                pub_date=format_pub_date(entry.get("published", "")),
            )
        )
    return items


def fetch_feed(
    url: str,
    limit: int = MAX_NEWS_ITEMS,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[NewsItem]:
    """
    Fetch a news RSS feed.

    Args:
        url: Feed URL.
        limit: Maximum number of items to keep.
        timeout: Request timeout in seconds.

    Raises:
        FetchError: on network errors, timeouts and non-2xx responses.
        DecodeError: if the body is not a readable feed.
    """
    try:
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"news feed request failed ({url}): {exc}") from exc
    return decode_feed(resp.content, limit)
