"""
OpenRouteService directions oracle.

Uses OpenRouteService: https://openrouteservice.org/
Free tier: 2000 requests/day
Requires API key: OPENROUTESERVICE_API_KEY env var

There is no public-transport profile, so transit is not supported, and
departure times are ignored (no traffic model).
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import requests

from farthest_reach.oracles.base import OracleUnavailableError
from farthest_reach.schemas import TravelMode
from farthest_reach.services.http import session as default_session

if TYPE_CHECKING:
    from datetime import datetime

    from farthest_reach.geo import GeoPoint

logger = logging.getLogger(__name__)

ORS_API = "https://api.openrouteservice.org/v2"

PROFILES: dict[TravelMode, str] = {
    TravelMode.DRIVING: "driving-car",
    TravelMode.WALKING: "foot-walking",
    TravelMode.BICYCLING: "cycling-regular",
}


def parse_summary_duration(data: dict[str, Any]) -> int | None:
    """Duration of the first feature's route summary, rounded to seconds."""
    features = data.get("features")
    if not isinstance(features, list) or not features or not isinstance(features[0], dict):
        return None
    properties = features[0].get("properties")
    summary = properties.get("summary") if isinstance(properties, dict) else None
    duration = summary.get("duration") if isinstance(summary, dict) else None
    if not isinstance(duration, int | float) or isinstance(duration, bool) or duration < 0:
        return None
    return round(duration)


class OpenRouteServiceOracle:
    """Travel durations from OpenRouteService ``/v2/directions/{profile}``."""

    supported_modes = frozenset(PROFILES)

    def __init__(self, api_key: str | None, session: requests.Session | None = None) -> None:
        if not api_key:
            raise OracleUnavailableError("OPENROUTESERVICE_API_KEY is not set")
        self._api_key = api_key
        self._session = session or default_session

    def fetch_duration(self, origin: GeoPoint, destination: GeoPoint, mode: TravelMode) -> int | None:
        """Blocking single request. Prefer ``estimate`` from async code."""
        profile = PROFILES.get(mode)
        if profile is None:
            return None

        try:
            resp = self._session.get(
                f"{ORS_API}/directions/{profile}",
                params={"start": origin.as_lng_lat(), "end": destination.as_lng_lat()},
                headers={"Authorization": self._api_key},
            )
            if resp.status_code == 404:
                # ORS answers 404 when either end is not near a routable road
                return None
            resp.raise_for_status()
            data: dict[str, Any] = resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("OpenRouteService request failed: %s", exc)
            return None
        if not isinstance(data, dict):
            return None
        return parse_summary_duration(data)

    async def estimate(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        mode: TravelMode,
        departure_time: datetime,
    ) -> int | None:
        return await asyncio.to_thread(self.fetch_duration, origin, destination, mode)
