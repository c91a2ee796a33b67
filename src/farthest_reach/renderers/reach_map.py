"""Leaflet map of a search result.

Rays to every reachable bearing are drawn faintly; the ray to the farthest
point is highlighted and the view is fitted to origin + farthest point.
"""

from __future__ import annotations

from typing import Any

from farthest_reach.renderers import render_template
from farthest_reach.renderers.geojson import build_feature_collection
from farthest_reach.renderers.summary import format_duration, format_km

RAY_STYLE = {"color": "#3b82f6", "opacity": 0.4, "weight": 2}
FARTHEST_RAY_STYLE = {"color": "#ef4444", "opacity": 0.9, "weight": 3}
FARTHEST_MARKER_STYLE = {
    "radius": 6,
    "fillColor": "#ef4444",
    "fillOpacity": 1,
    "color": "#b91c1c",
    "weight": 2,
}


def build_reach_map_html(data: dict[str, Any], title: str = "Farthest reachable point") -> str:
    """Render a standalone HTML page for one stored search result."""
    farthest = data.get("farthest")
    stats = None
    if farthest is not None:
        stats = {
            "distance": format_km(farthest["distance_meters"]),
            "duration": format_duration(farthest["duration_seconds"]),
            "bearing": f"{round(farthest['bearing_deg'])}°",
        }

    return render_template(
        "reach_map.html.j2",
        title=title,
        mode=data.get("mode", ""),
        budget=format_duration(data.get("budget_seconds", 0)),
        stats=stats,
        geojson=build_feature_collection(data),
        ray_style=RAY_STYLE,
        farthest_ray_style=FARTHEST_RAY_STYLE,
        farthest_marker_style=FARTHEST_MARKER_STYLE,
    )
