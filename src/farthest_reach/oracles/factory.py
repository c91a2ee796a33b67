"""Build an oracle by name from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from farthest_reach.oracles.google import GoogleDirectionsOracle
from farthest_reach.oracles.openrouteservice import OpenRouteServiceOracle
from farthest_reach.oracles.straight_line import StraightLineOracle
from farthest_reach.services.http import create_session

if TYPE_CHECKING:
    from farthest_reach.config import Settings
    from farthest_reach.oracles.base import TravelTimeOracle

ORACLE_NAMES = ("google", "openrouteservice", "straight-line")


def create_oracle(name: str, settings: Settings) -> TravelTimeOracle:
    """
    Instantiate the named oracle.

    Raises:
        ValueError: Unknown oracle name.
        OracleUnavailableError: The oracle's API key is missing.
    """
    if name == "google":
        return GoogleDirectionsOracle(
            settings.google_maps_api_key,
            session=create_session(timeout=settings.http_timeout),
        )
    if name == "openrouteservice":
        return OpenRouteServiceOracle(
            settings.openrouteservice_api_key,
            session=create_session(timeout=settings.http_timeout),
        )
    if name == "straight-line":
        return StraightLineOracle()
    supported = ", ".join(ORACLE_NAMES)
    raise ValueError(f"unsupported oracle '{name}', supported: {supported}")
