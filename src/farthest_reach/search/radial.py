"""
Radial bisection: the farthest within-budget distance along one bearing.

The oracle is slow (one network round-trip per probe) and only roughly
monotonic, so the search spends a fixed number of probes instead of
hunting for the exact boundary:

1. Seed ``high`` from the mode's nominal speed, discounted by 0.8.
2. Expand: while ``high`` is within budget, keep it as the best answer,
   make it the new ``low`` and double ``high`` (``expansion_rounds`` times).
3. Bisect ``[low, high]`` for ``bisection_rounds`` rounds at whole-meter
   granularity. A probe the oracle cannot answer ends the search with the
   best answer found so far.

Where travel time is not monotonic in distance the result can be a local
rather than global boundary on that bearing.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from farthest_reach.geo import GeoPoint, destination_point, normalize_bearing
from farthest_reach.search.models import ReachablePoint

if TYPE_CHECKING:
    from farthest_reach.oracles.base import TravelTimeOracle
    from farthest_reach.schemas import TravelMode

logger = logging.getLogger(__name__)

MIN_UPPER_BOUND_METERS = 1_000
SEED_DISCOUNT = 0.8

OffsetFunc = Callable[[GeoPoint, float, float], GeoPoint]


@dataclass(frozen=True)
class SearchParams:
    """Probe budget per bearing: at most ``expansion_rounds + bisection_rounds`` calls."""

    expansion_rounds: int = 3
    bisection_rounds: int = 7

    def __post_init__(self) -> None:
        if self.expansion_rounds < 0 or self.bisection_rounds < 0:
            raise ValueError("round counts must be >= 0")

    @property
    def max_calls(self) -> int:
        return self.expansion_rounds + self.bisection_rounds


def initial_upper_bound(mode: TravelMode, budget_seconds: float) -> int:
    """First distance to probe, in meters."""
    hours = budget_seconds / 3600
    avg_km = mode.average_speed_kmh * hours * SEED_DISCOUNT
    return max(MIN_UPPER_BOUND_METERS, math.floor(avg_km * 1000))


async def search_bearing(
    oracle: TravelTimeOracle,
    origin: GeoPoint,
    bearing_deg: float,
    mode: TravelMode,
    budget_seconds: float,
    *,
    params: SearchParams | None = None,
    departure_time: datetime | None = None,
    offset: OffsetFunc = destination_point,
) -> ReachablePoint | None:
    """
    Find the farthest point on ``bearing_deg`` reachable within the budget.

    Args:
        oracle: Travel-time source.
        origin: Start point.
        bearing_deg: Direction, taken modulo 360.
        mode: Travel mode passed to the oracle.
        budget_seconds: Time available (>= 0).
        params: Round counts (defaults to 3 expansion + 7 bisection).
        departure_time: Departure for every probe on this bearing.
            Captured once as "now" when omitted.
        offset: Geo-offset function (origin, meters, bearing) -> point.

    Returns:
        The best within-budget point, or None if no probe was within budget.
    """
    if budget_seconds < 0:
        raise ValueError("budget_seconds must be >= 0")
    params = params or SearchParams()
    departure = departure_time or datetime.now(UTC)
    bearing = normalize_bearing(bearing_deg)

    low = 0
    high = initial_upper_bound(mode, budget_seconds)
    best: ReachablePoint | None = None
    calls = 0

    async def probe(distance: int) -> tuple[GeoPoint, int | None]:
        nonlocal calls
        calls += 1
        point = offset(origin, distance, bearing)
        try:
            seconds = await oracle.estimate(origin, point, mode, departure)
        except Exception:
            # An oracle that breaks its contract counts as "no answer"
            logger.warning(
                "oracle failed at bearing=%.1f distance=%d", bearing, distance, exc_info=True
            )
            seconds = None
        logger.debug("bearing=%.1f distance=%d -> %s s", bearing, distance, seconds)
        return point, seconds

    for _ in range(params.expansion_rounds):
        point, seconds = await probe(high)
        if seconds is None or seconds > budget_seconds:
            break
        best = ReachablePoint(point, high, seconds, bearing)
        low = high
        high *= 2

    for _ in range(params.bisection_rounds):
        mid = (low + high) // 2
        if mid == low:
            break
        point, seconds = await probe(mid)
        if seconds is None:
            break
        if seconds <= budget_seconds:
            low = mid
            best = ReachablePoint(point, mid, seconds, bearing)
        else:
            high = mid

    if best is None:
        logger.info("bearing=%.1f unreachable after %d oracle calls", bearing, calls)
    else:
        logger.info(
            "bearing=%.1f reached %d m in %d s after %d oracle calls",
            bearing,
            best.distance_meters,
            best.duration_seconds,
            calls,
        )
    return best
