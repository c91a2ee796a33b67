"""Google Directions web service oracle.

API docs: https://developers.google.com/maps/documentation/directions/get-directions
Requires API key: GOOGLE_MAPS_API_KEY env var
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

DIRECTIONS_API = "https://maps.googleapis.com/maps/api/directions/json"

# Statuses that mean "this origin/destination pair has no route"
NO_ROUTE_STATUSES = frozenset({"ZERO_RESULTS", "NOT_FOUND", "MAX_ROUTE_LENGTH_EXCEEDED"})


def _first(items: Any) -> dict[str, Any] | None:
    """First element of a JSON array if it is an object, else None."""
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return None


def parse_directions_duration(data: dict[str, Any]) -> int | None:
    """Pull the first leg's duration out of a Directions response.

    Prefers ``duration_in_traffic`` (driving with a departure time) over the
    plain ``duration``. Returns None for any non-OK or malformed payload.
    """
    status = data.get("status")
    if status != "OK":
        if not isinstance(status, str) or status not in NO_ROUTE_STATUSES:
            logger.warning(
                "Directions status %s: %s", status, data.get("error_message", "no message")
            )
        return None

    route = _first(data.get("routes"))
    leg = _first(route.get("legs")) if route else None
    if leg is None:
        return None

    for key in ("duration_in_traffic", "duration"):
        field = leg.get(key)
        value = field.get("value") if isinstance(field, dict) else None
        if isinstance(value, int | float) and not isinstance(value, bool) and value >= 0:
            return int(value)
    return None


class GoogleDirectionsOracle:
    """Travel durations from the Google Directions API."""

    supported_modes = frozenset(TravelMode)

    def __init__(
        self,
        api_key: str | None,
        session: requests.Session | None = None,
        language: str = "ja",
        region: str = "jp",
    ) -> None:
        if not api_key:
            raise OracleUnavailableError("GOOGLE_MAPS_API_KEY is not set")
        self._api_key = api_key
        self._session = session or default_session
        self._language = language
        self._region = region

    def build_params(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        mode: TravelMode,
        departure_time: datetime,
    ) -> dict[str, str | int]:
        """Query parameters for one directions request."""
        params: dict[str, str | int] = {
            "origin": origin.as_lat_lng(),
            "destination": destination.as_lat_lng(),
            "mode": mode.value,
            "alternatives": "false",
            "language": self._language,
            "region": self._region,
            "key": self._api_key,
        }
        # Only traffic- and schedule-aware modes take a departure time
        if mode is TravelMode.DRIVING:
            params["departure_time"] = int(departure_time.timestamp())
            params["traffic_model"] = "best_guess"
        elif mode is TravelMode.TRANSIT:
            params["departure_time"] = int(departure_time.timestamp())
        return params

    def fetch_duration(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        mode: TravelMode,
        departure_time: datetime,
    ) -> int | None:
        """Blocking single request. Prefer ``estimate`` from async code."""
        params = self.build_params(origin, destination, mode, departure_time)
        try:
            resp = self._session.get(DIRECTIONS_API, params=params)
            resp.raise_for_status()
            data: dict[str, Any] = resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Directions request failed: %s", exc)
            return None
        if not isinstance(data, dict):
            return None
        return parse_directions_duration(data)

    async def estimate(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        mode: TravelMode,
        departure_time: datetime,
    ) -> int | None:
        return await asyncio.to_thread(
            self.fetch_duration, origin, destination, mode, departure_time
        )
