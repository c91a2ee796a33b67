"""Run the radial search on evenly spaced bearings and keep the farthest."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from farthest_reach.search.models import AggregateResult, SearchOutcome
from farthest_reach.search.radial import SearchParams, search_bearing

if TYPE_CHECKING:
    from datetime import datetime

    from farthest_reach.geo import GeoPoint
    from farthest_reach.oracles.base import TravelTimeOracle
    from farthest_reach.schemas import TravelMode

logger = logging.getLogger(__name__)


def bearing_angles(count: int) -> list[float]:
    """``count`` bearings spaced ``360 / count`` degrees apart, from 0."""
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise ValueError("bearing_count must be a positive integer")
    step = 360 / count
    return [i * step for i in range(count)]


async def search(
    oracle: TravelTimeOracle,
    origin: GeoPoint | None,
    mode: TravelMode,
    budget_seconds: float,
    bearing_count: int = 8,
    *,
    params: SearchParams | None = None,
    max_concurrency: int | None = None,
    departure_time: datetime | None = None,
) -> AggregateResult:
    """
    Farthest point reachable from ``origin`` over ``bearing_count`` bearings.

    Bearings run concurrently, at most ``max_concurrency`` at a time
    (``1`` searches them one after another). Within a bearing, probes are
    sequential. Input is validated before the first oracle call.

    Returns:
        AggregateResult whose ``farthest`` is None when no bearing reached
        any point within the budget.

    Raises:
        ValueError: Missing origin, bad bearing count, negative budget,
            bad concurrency limit, or a mode the oracle cannot route.
    """
    if origin is None:
        raise ValueError("origin is required")
    bearings = bearing_angles(bearing_count)
    if budget_seconds < 0:
        raise ValueError("budget_seconds must be >= 0")
    if max_concurrency is not None and max_concurrency <= 0:
        raise ValueError("max_concurrency must be > 0")
    if mode not in oracle.supported_modes:
        raise ValueError(f"oracle does not support travel mode '{mode}'")

    params = params or SearchParams()
    semaphore = asyncio.Semaphore(max_concurrency or len(bearings))

    async def _search_with_limit(bearing: float) -> SearchOutcome:
        async with semaphore:
            return await search_bearing(
                oracle,
                origin,
                bearing,
                mode,
                budget_seconds,
                params=params,
                departure_time=departure_time,
            )

    logger.info(
        "search started: origin=(%s, %s) mode=%s budget=%ss bearings=%d",
        origin.lat,
        origin.lng,
        mode,
        budget_seconds,
        len(bearings),
    )
    # gather keeps bearing order regardless of completion order
    outcomes = await asyncio.gather(*(_search_with_limit(b) for b in bearings))
    result = AggregateResult.from_outcomes(origin, mode, budget_seconds, bearings, outcomes)

    if result.farthest is None:
        logger.info("search finished: no reachable point on any bearing")
    else:
        logger.info(
            "search finished: farthest %d m at bearing %.1f (%d/%d bearings reachable)",
            result.farthest.distance_meters,
            result.farthest.bearing_deg,
            len(result.reachable),
            len(bearings),
        )
    return result
