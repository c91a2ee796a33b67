"""Offline oracle: great-circle distance at the mode's nominal speed.

Never returns None. Handy for dry runs of the search without spending
directions quota.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from farthest_reach.geo import haversine_distance_meters
from farthest_reach.schemas import TravelMode

if TYPE_CHECKING:
    from datetime import datetime

    from farthest_reach.geo import GeoPoint


def estimate_travel_seconds(distance_meters: float, average_speed_kmh: float) -> float:
    if average_speed_kmh <= 0:
        raise ValueError("average_speed_kmh must be > 0")
    meters_per_second = average_speed_kmh * 1000 / 3600
    return distance_meters / meters_per_second


class StraightLineOracle:
    """Deterministic travel times along the straight (great-circle) line."""

    supported_modes = frozenset(TravelMode)

    def __init__(self, speed_factor: float = 1.0) -> None:
        if speed_factor <= 0:
            raise ValueError("speed_factor must be > 0")
        self.speed_factor = speed_factor

    def duration(self, origin: GeoPoint, destination: GeoPoint, mode: TravelMode) -> int:
        distance = haversine_distance_meters(origin, destination)
        return round(estimate_travel_seconds(distance, mode.average_speed_kmh * self.speed_factor))

    async def estimate(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        mode: TravelMode,
        departure_time: datetime,
    ) -> int | None:
        return self.duration(origin, destination, mode)
