"""Tests for the shared HTTP session."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest
import requests

from weather_dashboard import __version__
from weather_dashboard.datasources.weather import fetch_forecast
from weather_dashboard.exceptions import FetchError
from weather_dashboard.services.http import USER_AGENT, create_session, session


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        assert isinstance(create_session(), requests.Session)

    def test_user_agent_header(self) -> None:
        s = create_session()
        assert s.headers["User-Agent"] == f"weather-dashboard/{__version__}"

    def test_module_session_identifies_dashboard(self) -> None:
        assert session.headers["User-Agent"] == USER_AGENT


class TestSessionTimeout:
    """Datasources pass the configured timeout on every request."""

    @patch("weather_dashboard.datasources.weather.forecast.session.get")
    def test_timeout_passed_through(self, mock_get: Mock) -> None:
        mock_get.side_effect = requests.Timeout("slow")
        with pytest.raises(FetchError):
            fetch_forecast("130010", timeout=2.5)
        assert mock_get.call_args.kwargs["timeout"] == 2.5
