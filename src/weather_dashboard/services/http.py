"""
Shared HTTP session for the datasources.

Every datasource calls this session with an explicit ``timeout=`` taken
from ``Settings.http_timeout``. There are no retries: a failed attempt
(a timeout included) is reported to the caller, which falls back to
sample data.

Usage::

    from weather_dashboard.services.http import session

    resp = session.get(url, timeout=settings.http_timeout)
    resp.raise_for_status()
"""

from __future__ import annotations

import requests

from weather_dashboard import __version__

DEFAULT_TIMEOUT = 10.0  # seconds, for callers outside the flows
USER_AGENT = f"weather-dashboard/{__version__}"


def create_session() -> requests.Session:
    """Build a ``requests.Session`` that identifies the dashboard."""
    s = requests.Session()
    s.headers["User-Agent"] = USER_AGENT
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session()
