"""Celsius text parsing.

The weather source reports temperatures as strings that may be empty or
``null`` (e.g. today's minimum once the morning has passed).
"""

from __future__ import annotations

import re

from weather_dashboard.exceptions import ParseError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_temperature(text: str | None) -> int:
    """Parse a whole-degree Celsius string.

    Raises:
        ParseError: if ``text`` is None, empty, ``"null"`` or not a base-10
            integer. Decimals such as ``"25.5"`` are rejected, not truncated.
    """
    if text is None or text == "" or text == "null":
        raise ParseError(f"empty temperature: {text!r}")
    if not _INTEGER_RE.fullmatch(text):
        raise ParseError(f"not an integer temperature: {text!r}")
    return int(text)


def parse_temperature_or_none(text: str | None) -> int | None:
    """Like :func:`parse_temperature`, but an unusable value becomes None."""
    try:
        return parse_temperature(text)
    except ParseError:
        return None
