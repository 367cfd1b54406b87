"""Pure rendering functions: report -> HTML strings.

Renderers follow the same pattern:
  - Input: schema models (WeatherReport and its parts)
  - Output: str (HTML)
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py which writes the result to the site directory.

Public API:
  - dashboard: build_dashboard_html, chart_points

Adding a section
----------------
1. Add any derived view data in ``renderers/dashboard.py`` (keep the
   template free of arithmetic).
2. Add the markup to ``templates/index.html.j2`` and styles to
   ``styles/kindle.css``.
3. Add tests: render a sample report and assert the HTML contains the
   expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
