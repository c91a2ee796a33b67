"""Search result records and the farthest-point selection rule."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from farthest_reach.geo import GeoPoint
from farthest_reach.schemas import TravelMode


@dataclass(frozen=True)
class ReachablePoint:
    """Farthest within-budget point found on one bearing.

    ``duration_seconds`` is the oracle's estimate for ``point`` and never
    exceeds the budget of the search that produced it.
    """

    point: GeoPoint
    distance_meters: int
    duration_seconds: int
    bearing_deg: float

    def __post_init__(self) -> None:
        if self.distance_meters < 0:
            raise ValueError("distance_meters must be >= 0")
        if self.duration_seconds < 0:
            raise ValueError("duration_seconds must be >= 0")
        if not 0 <= self.bearing_deg < 360:
            raise ValueError("bearing_deg must be in [0, 360)")


#: ``None`` means unreachable on that bearing
SearchOutcome = ReachablePoint | None


def select_farthest(points: Iterable[ReachablePoint]) -> ReachablePoint | None:
    """Greatest distance wins; ties go to the smallest bearing.

    Bearings ascend with their index, so this is the bearing-index
    tie-break, and the answer does not depend on input order.
    """
    best: ReachablePoint | None = None
    for candidate in points:
        if best is None or (candidate.distance_meters, -candidate.bearing_deg) > (
            best.distance_meters,
            -best.bearing_deg,
        ):
            best = candidate
    return best


@dataclass(frozen=True)
class AggregateResult:
    """Everything one multi-bearing search produced."""

    origin: GeoPoint
    mode: TravelMode
    budget_seconds: float
    bearings: tuple[float, ...]
    outcomes: tuple[SearchOutcome, ...]
    farthest: ReachablePoint | None

    @property
    def found(self) -> bool:
        """False when no bearing yielded a within-budget point."""
        return self.farthest is not None

    @property
    def reachable(self) -> list[ReachablePoint]:
        """Per-bearing results, in bearing order, unreachable ones dropped."""
        return [outcome for outcome in self.outcomes if outcome is not None]

    @classmethod
    def from_outcomes(
        cls,
        origin: GeoPoint,
        mode: TravelMode,
        budget_seconds: float,
        bearings: Iterable[float],
        outcomes: Iterable[SearchOutcome],
    ) -> AggregateResult:
        outcomes = tuple(outcomes)
        return cls(
            origin=origin,
            mode=mode,
            budget_seconds=budget_seconds,
            bearings=tuple(bearings),
            outcomes=outcomes,
            farthest=select_farthest(o for o in outcomes if o is not None),
        )


def reachable_point_to_dict(point: ReachablePoint) -> dict[str, Any]:
    return {
        "lat": point.point.lat,
        "lng": point.point.lng,
        "distance_meters": point.distance_meters,
        "duration_seconds": point.duration_seconds,
        "bearing_deg": point.bearing_deg,
    }


def result_to_dict(result: AggregateResult) -> dict[str, Any]:
    """JSON-serializable form of a search result, for the store and renderers."""
    return {
        "origin": {"lat": result.origin.lat, "lng": result.origin.lng},
        "mode": result.mode.value,
        "budget_seconds": result.budget_seconds,
        "bearings": list(result.bearings),
        "outcomes": [
            {"bearing_deg": bearing, "reachable": False}
            if outcome is None
            else {**reachable_point_to_dict(outcome), "reachable": True}
            for bearing, outcome in zip(result.bearings, result.outcomes, strict=True)
        ],
        "farthest": reachable_point_to_dict(result.farthest) if result.farthest else None,
    }
