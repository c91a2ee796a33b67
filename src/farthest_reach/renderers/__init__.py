"""Pure rendering functions: stored search results -> text, GeoJSON, HTML.

All renderers follow the same pattern:
  - Input: the dict produced by ``search.result_to_dict`` (as stored)
  - Output: str or JSON-serializable dict
  - No side effects, no I/O, no Prefect decorators

Used by cli.py and flows/search.py.

Public API:
  - summary: format_duration, format_km, build_summary_text
  - geojson: build_feature_collection
  - reach_map: build_reach_map_html
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
