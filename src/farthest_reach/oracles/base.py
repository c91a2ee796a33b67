"""Travel-time oracle contract."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from farthest_reach.geo import GeoPoint
    from farthest_reach.schemas import TravelMode


class OracleUnavailableError(RuntimeError):
    """Raised when an oracle cannot be used at all (e.g. no API key)."""


class TravelTimeOracle(Protocol):
    """Anything that can estimate a travel duration between two points.

    ``estimate`` returns whole seconds, or ``None`` when there is no route,
    the request failed or the response could not be read. It never raises
    for those cases.
    """

    supported_modes: frozenset[TravelMode]

    async def estimate(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        mode: TravelMode,
        departure_time: datetime,
    ) -> int | None: ...
