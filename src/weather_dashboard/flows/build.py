"""
Prefect flow for building the static dashboard page.

Renders a WeatherReport into ``{site_dir}/index.html`` and copies the
stylesheet next to it.

Run locally:
    python -m weather_dashboard.flows.build
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any

from prefect import flow, task

from weather_dashboard.config import get_settings
from weather_dashboard.renderers.dashboard import build_dashboard_html
from weather_dashboard.schemas import WeatherReport  # noqa: TC001

STYLES_DIR = Path(__file__).resolve().parent.parent / "styles"
STYLESHEET = "kindle.css"


@task(name="build-html")
def build_html(report: WeatherReport) -> str:
    """Render the dashboard page."""
    return build_dashboard_html(report)


@task(name="write-site")
def write_site(html: str, site_dir: Path) -> Path:
    """Write HTML to the site directory."""
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


@task(name="copy-styles")
def copy_styles(site_dir: Path) -> Path:
    """Copy the stylesheet to ``{site_dir}/styles/``."""
    styles_dir = site_dir / "styles"
    styles_dir.mkdir(parents=True, exist_ok=True)
    return Path(shutil.copyfile(STYLES_DIR / STYLESHEET, styles_dir / STYLESHEET))


@flow(name="build-site", log_prints=True)
def build_all(report: WeatherReport, site_dir: Path | None = None) -> dict[str, Any]:
    """
    Build the static site for a report.

    Args:
        report: Assembled dashboard report.
        site_dir: Output directory (default: ``site_dir`` from settings).
    """
    if site_dir is None:
        site_dir = Path(get_settings().site_dir)

    if report.is_using_fallback_data:
        print("Warning: building from sample data.")

    print("Building HTML...")
    html = build_html(report)

    print("Writing site...")
    output_path = write_site(html, site_dir)
    css_path = copy_styles(site_dir)

    print(f"Site built: {output_path}")
    return {"pages": 1, "output": str(output_path), "styles": str(css_path)}


if __name__ == "__main__":
    from weather_dashboard.flows.fetch import fetch_report

    result = build_all(fetch_report())
    print(f"Flow complete: {result}")
