"""
Shared test fixtures.

Synthetic oracles stand in for the routing service so the search can be
tested deterministically and offline.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

import pytest

from farthest_reach.geo import GeoPoint, haversine_distance_meters
from farthest_reach.schemas import TravelMode

TOKYO_STATION = GeoPoint(lat=35.681236, lng=139.767125)
FIXED_DEPARTURE = datetime(2026, 10, 17, 9, 0, tzinfo=UTC)


class FakeOracle:
    """Oracle whose answer is a function of the straight-line distance.

    Records every call as ``(destination, distance_meters, departure_time)``.
    """

    supported_modes = frozenset(TravelMode)

    def __init__(self, duration_for: Callable[[float], int | None]) -> None:
        self.duration_for = duration_for
        self.calls: list[tuple[GeoPoint, float, datetime]] = []

    async def estimate(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        mode: TravelMode,
        departure_time: datetime,
    ) -> int | None:
        distance = haversine_distance_meters(origin, destination)
        self.calls.append((destination, distance, departure_time))
        return self.duration_for(distance)

    @property
    def distances(self) -> list[float]:
        return [distance for _, distance, _ in self.calls]


def constant_speed(meters_per_second: float) -> Callable[[float], int]:
    """Strictly increasing duration: distance / speed, rounded to seconds."""
    return lambda distance: round(distance / meters_per_second)


WALKING_5KMH = 5000 / 3600


@pytest.fixture
def origin() -> GeoPoint:
    return TOKYO_STATION


@pytest.fixture
def walking_oracle() -> FakeOracle:
    return FakeOracle(constant_speed(WALKING_5KMH))


@pytest.fixture
def no_route_oracle() -> FakeOracle:
    return FakeOracle(lambda _distance: None)
