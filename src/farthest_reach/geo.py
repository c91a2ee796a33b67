"""Spherical geometry primitives.

All distances are meters on a spherical Earth, all angles are degrees.
Bearings are measured clockwise from north.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS_METERS = 6_371_000


@dataclass(frozen=True)
class GeoPoint:
    """Latitude/longitude pair in degrees."""

    lat: float
    lng: float

    def as_lat_lng(self) -> str:
        """Return ``"lat,lng"`` as used in directions query strings."""
        return f"{self.lat},{self.lng}"

    def as_lng_lat(self) -> str:
        """Return ``"lng,lat"`` (GeoJSON / OpenRouteService order)."""
        return f"{self.lng},{self.lat}"


def normalize_bearing(bearing_deg: float) -> float:
    """Fold any angle into [0, 360)."""
    bearing = bearing_deg % 360.0
    # -1e-20 % 360 rounds up to 360.0
    return 0.0 if bearing == 360.0 else bearing


def _normalize_lng(lng: float) -> float:
    return (lng + 540.0) % 360.0 - 180.0


def destination_point(origin: GeoPoint, distance_meters: float, bearing_deg: float) -> GeoPoint:
    """
    Point reached by travelling along a great circle from ``origin``.

    Args:
        origin: Start point.
        distance_meters: Distance along the surface (>= 0).
        bearing_deg: Initial bearing, taken modulo 360.

    Returns:
        The destination. ``origin`` itself when the distance is zero.
    """
    if distance_meters < 0:
        raise ValueError("distance_meters must be >= 0")
    if distance_meters == 0:
        return origin

    angular = distance_meters / EARTH_RADIUS_METERS
    theta = math.radians(normalize_bearing(bearing_deg))
    lat1 = math.radians(origin.lat)
    lng1 = math.radians(origin.lng)

    sin_lat2 = math.sin(lat1) * math.cos(angular) + math.cos(lat1) * math.sin(angular) * math.cos(
        theta
    )
    lat2 = math.asin(max(-1.0, min(1.0, sin_lat2)))
    lng2 = lng1 + math.atan2(
        math.sin(theta) * math.sin(angular) * math.cos(lat1),
        math.cos(angular) - math.sin(lat1) * sin_lat2,
    )
    return GeoPoint(lat=math.degrees(lat2), lng=_normalize_lng(math.degrees(lng2)))


# Name used throughout the search code
offset = destination_point


def haversine_distance_meters(start: GeoPoint, end: GeoPoint) -> float:
    """Great-circle distance between two points."""
    start_lat = math.radians(start.lat)
    end_lat = math.radians(end.lat)
    delta_lat = math.radians(end.lat - start.lat)
    delta_lng = math.radians(end.lng - start.lng)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(start_lat) * math.cos(end_lat) * math.sin(delta_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c
