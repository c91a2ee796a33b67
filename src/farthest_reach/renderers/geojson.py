"""GeoJSON view of a search result: origin, one ray per bearing, farthest point."""

from __future__ import annotations

from typing import Any


def _point(lat: float, lng: float, **properties: Any) -> dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [lng, lat]},
        "properties": properties,
    }


def _ray(origin: dict[str, float], end: dict[str, Any], **properties: Any) -> dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {
            "type": "LineString",
            "coordinates": [[origin["lng"], origin["lat"]], [end["lng"], end["lat"]]],
        },
        "properties": properties,
    }


def build_feature_collection(data: dict[str, Any]) -> dict[str, Any]:
    """
    Build a FeatureCollection from a stored search result.

    Features carry a ``role`` property: ``origin``, ``ray`` (every reachable
    bearing), ``farthest`` (the winning point) and ``farthest-ray``.
    """
    origin = data["origin"]
    features = [
        _point(origin["lat"], origin["lng"], role="origin", mode=data.get("mode")),
    ]

    for outcome in data.get("outcomes", []):
        if not outcome.get("reachable"):
            continue
        features.append(
            _ray(
                origin,
                outcome,
                role="ray",
                bearing_deg=outcome["bearing_deg"],
                distance_meters=outcome["distance_meters"],
                duration_seconds=outcome["duration_seconds"],
            )
        )

    farthest = data.get("farthest")
    if farthest is not None:
        stats = {
            "bearing_deg": farthest["bearing_deg"],
            "distance_meters": farthest["distance_meters"],
            "duration_seconds": farthest["duration_seconds"],
        }
        features.append(_ray(origin, farthest, role="farthest-ray", **stats))
        features.append(_point(farthest["lat"], farthest["lng"], role="farthest", **stats))

    return {"type": "FeatureCollection", "features": features}
