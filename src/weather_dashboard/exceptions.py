"""Exception classes for the dashboard pipeline."""


class DashboardError(Exception):
    """Base exception for all dashboard errors."""

    pass


class ParseError(DashboardError, ValueError):
    """A temperature value was empty, ``"null"`` or not an integer."""

    pass


class FetchError(DashboardError):
    """A data source could not be reached (network error, timeout, bad status)."""

    pass


class DecodeError(DashboardError):
    """A data source answered with a payload we could not decode."""

    pass
