"""Dashboard page renderer.

Lays the hourly samples out along the x axis of the temperature chart and
renders ``index.html.j2``. Vertical positions come from ``chart_y``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from weather_dashboard.renderers import render_template

if TYPE_CHECKING:
    from weather_dashboard.schemas import HourlySample, WeatherReport

# Horizontal padding of the chart, in percent of its width
CHART_MARGIN_X = 5.0


def chart_points(samples: list[HourlySample]) -> list[dict[str, Any]]:
    """Return ``x``/``y`` chart positions (percent) with the sample's labels."""
    if not samples:
        return []
    n = len(samples)
    width = 100 - 2 * CHART_MARGIN_X
    points = []
    for i, sample in enumerate(samples):
        x = 50.0 if n == 1 else CHART_MARGIN_X + i * width / (n - 1)
        points.append(
            {
                "x": f"{x:.1f}",
                "y": sample.chart_y,
                "time": sample.time,
                "temp": sample.temp,
                "icon": sample.icon,
                "rain_chance": sample.rain_chance,
            }
        )
    return points


def _polyline(points: list[dict[str, Any]]) -> str:
    return " ".join(f"{p['x']},{p['y']}" for p in points)


def _area(points: list[dict[str, Any]]) -> str:
    """Polygon closing the temperature line down to the chart floor."""
    if not points:
        return ""
    return f"{points[0]['x']},100 {_polyline(points)} {points[-1]['x']},100"


def build_dashboard_html(report: WeatherReport) -> str:
    """Render the full dashboard page for a report."""
    points = chart_points(report.hourly)
    return render_template(
        "index.html.j2",
        report=report,
        chart=points,
        chart_line=_polyline(points),
        chart_area=_area(points),
    )
