"""
Domain schemas for farthest reach.

Pydantic models validate caller input at the boundary (CLI, flows); the
search core works on the plain dataclasses in ``geo`` and ``search.models``.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from farthest_reach.geo import GeoPoint

# =============================================================================
# Travel modes
# =============================================================================

# Nominal speeds used only to seed the search's first distance guess
AVERAGE_SPEED_KMH: dict[str, float] = {
    "driving": 70.0,
    "walking": 5.0,
    "bicycling": 15.0,
    "transit": 40.0,
}


class TravelMode(StrEnum):
    """How the traveller moves."""

    DRIVING = "driving"
    WALKING = "walking"
    BICYCLING = "bicycling"
    TRANSIT = "transit"

    @property
    def average_speed_kmh(self) -> float:
        """Heuristic average speed, not a contract with any oracle."""
        return AVERAGE_SPEED_KMH[self.value]


# =============================================================================
# Requests
# =============================================================================


class SearchRequest(BaseModel):
    """A validated farthest-reach query."""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    mode: TravelMode = TravelMode.DRIVING
    budget_seconds: int = Field(..., ge=0, description="Time left until the deadline")
    bearing_count: int = Field(default=8, ge=1)

    @property
    def origin(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lng=self.lng)
