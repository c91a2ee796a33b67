"""Travel-time oracles.

Each oracle answers "how many seconds from A to B by this mode, leaving
now?" and returns None instead of raising when it cannot tell.

Public API:
  - base: TravelTimeOracle protocol, OracleUnavailableError
  - google: GoogleDirectionsOracle (all modes, traffic/schedule aware)
  - openrouteservice: OpenRouteServiceOracle (no transit)
  - straight_line: StraightLineOracle (offline, great-circle at nominal speed)
  - factory: create_oracle(name, settings)
"""

from farthest_reach.oracles.base import OracleUnavailableError, TravelTimeOracle
from farthest_reach.oracles.factory import ORACLE_NAMES, create_oracle
from farthest_reach.oracles.google import GoogleDirectionsOracle
from farthest_reach.oracles.openrouteservice import OpenRouteServiceOracle
from farthest_reach.oracles.straight_line import StraightLineOracle

__all__ = [
    "ORACLE_NAMES",
    "GoogleDirectionsOracle",
    "OpenRouteServiceOracle",
    "OracleUnavailableError",
    "StraightLineOracle",
    "TravelTimeOracle",
    "create_oracle",
]
