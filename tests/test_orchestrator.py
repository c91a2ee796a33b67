"""Tests for the multi-bearing search orchestrator."""

from __future__ import annotations

import asyncio
from datetime import datetime

import pytest

from conftest import FIXED_DEPARTURE, WALKING_5KMH, FakeOracle, constant_speed
from farthest_reach.geo import GeoPoint, haversine_distance_meters
from farthest_reach.schemas import TravelMode
from farthest_reach.search.models import result_to_dict, select_farthest
from farthest_reach.search.orchestrator import bearing_angles, search
from farthest_reach.search.radial import search_bearing


class SlowDirectionalOracle:
    """South-bound trips are twice as fast; northern bearings answer slowest.

    Tracks the peak number of estimates in flight at once.
    """

    supported_modes = frozenset(TravelMode)

    def __init__(self) -> None:
        self.in_flight = 0
        self.peak = 0

    async def estimate(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        mode: TravelMode,
        departure_time: datetime,
    ) -> int | None:
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        try:
            north = destination.lat >= origin.lat
            await asyncio.sleep(0.002 if north else 0)
            speed = WALKING_5KMH if north else 2 * WALKING_5KMH
            return round(haversine_distance_meters(origin, destination) / speed)
        finally:
            self.in_flight -= 1


class WalkingOnlyOracle(FakeOracle):
    supported_modes = frozenset({TravelMode.WALKING})


class TestBearingAngles:
    def test_eight(self) -> None:
        assert bearing_angles(8) == [0, 45, 90, 135, 180, 225, 270, 315]

    def test_one(self) -> None:
        assert bearing_angles(1) == [0]

    def test_uneven_spacing(self) -> None:
        angles = bearing_angles(7)
        assert len(angles) == 7
        assert angles[1] == pytest.approx(360 / 7)
        assert all(0 <= a < 360 for a in angles)

    @pytest.mark.parametrize("count", [0, -3, 2.5, True])
    def test_invalid_count(self, count: int) -> None:
        with pytest.raises(ValueError):
            bearing_angles(count)


class TestSearch:
    @pytest.mark.asyncio
    async def test_isotropic_ties_go_to_first_bearing(
        self, origin: GeoPoint, walking_oracle: FakeOracle
    ) -> None:
        result = await search(walking_oracle, origin, TravelMode.WALKING, 3600, 8)

        assert result.found
        assert len(result.outcomes) == 8
        for outcome in result.outcomes:
            assert outcome is not None
            assert outcome.distance_meters == pytest.approx(5000, abs=50)
        assert result.farthest is not None
        assert result.farthest.bearing_deg == 0

    @pytest.mark.asyncio
    async def test_single_bearing_matches_search_bearing(self, origin: GeoPoint) -> None:
        oracle = FakeOracle(constant_speed(WALKING_5KMH))

        result = await search(
            oracle, origin, TravelMode.WALKING, 3600, 1, departure_time=FIXED_DEPARTURE
        )
        direct = await search_bearing(
            oracle, origin, 0, TravelMode.WALKING, 3600, departure_time=FIXED_DEPARTURE
        )

        assert result.outcomes == (direct,)
        assert result.farthest == direct

    @pytest.mark.asyncio
    async def test_picks_fastest_direction(self, origin: GeoPoint) -> None:
        result = await search(SlowDirectionalOracle(), origin, TravelMode.WALKING, 3600, 8)

        assert result.farthest is not None
        # due east and west great circles bend toward the equator
        assert result.farthest.bearing_deg in {90, 135, 180, 225, 270}
        assert result.farthest.distance_meters > 9000
        assert result.farthest == select_farthest(result.reachable)

    @pytest.mark.asyncio
    async def test_completion_order_does_not_matter(self, origin: GeoPoint) -> None:
        sequential = await search(
            SlowDirectionalOracle(),
            origin,
            TravelMode.WALKING,
            3600,
            12,
            max_concurrency=1,
            departure_time=FIXED_DEPARTURE,
        )
        concurrent = await search(
            SlowDirectionalOracle(),
            origin,
            TravelMode.WALKING,
            3600,
            12,
            departure_time=FIXED_DEPARTURE,
        )

        assert concurrent.outcomes == sequential.outcomes
        assert concurrent.farthest == sequential.farthest

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [1, 3])
    async def test_concurrency_limit(self, origin: GeoPoint, limit: int) -> None:
        oracle = SlowDirectionalOracle()
        await search(oracle, origin, TravelMode.WALKING, 3600, 8, max_concurrency=limit)
        assert oracle.peak == limit

    @pytest.mark.asyncio
    async def test_no_route_anywhere_is_not_an_error(
        self, origin: GeoPoint, no_route_oracle: FakeOracle
    ) -> None:
        result = await search(no_route_oracle, origin, TravelMode.DRIVING, 3600, 6)

        assert not result.found
        assert result.outcomes == (None,) * 6
        assert result.reachable == []

    @pytest.mark.asyncio
    async def test_zero_budget_every_bearing_unreachable(
        self, origin: GeoPoint, walking_oracle: FakeOracle
    ) -> None:
        result = await search(walking_oracle, origin, TravelMode.WALKING, 0, 8)

        assert not result.found
        assert all(outcome is None for outcome in result.outcomes)

    @pytest.mark.asyncio
    async def test_fractional_budget_kept_as_given(
        self, origin: GeoPoint, walking_oracle: FakeOracle
    ) -> None:
        result = await search(walking_oracle, origin, TravelMode.WALKING, 1800.5, 4)

        assert result.budget_seconds == 1800.5
        assert result_to_dict(result)["budget_seconds"] == 1800.5
        assert all(p.duration_seconds <= 1800.5 for p in result.reachable)

    @pytest.mark.asyncio
    async def test_raising_oracle_leaves_other_bearings_intact(self, origin: GeoPoint) -> None:
        speed = constant_speed(WALKING_5KMH)

        class NorthBrokenOracle(FakeOracle):
            async def estimate(
                self,
                origin: GeoPoint,
                destination: GeoPoint,
                mode: TravelMode,
                departure_time: datetime,
            ) -> int | None:
                if destination.lat > origin.lat:
                    raise TypeError("'NoneType' object is not subscriptable")
                return await super().estimate(origin, destination, mode, departure_time)

        result = await search(NorthBrokenOracle(speed), origin, TravelMode.WALKING, 3600, 4)

        assert result.outcomes[0] is None
        assert result.outcomes[2] is not None
        assert result.found


class TestSearchValidation:
    @pytest.mark.asyncio
    async def test_missing_origin(self, walking_oracle: FakeOracle) -> None:
        with pytest.raises(ValueError, match="origin"):
            await search(walking_oracle, None, TravelMode.WALKING, 3600, 8)
        assert walking_oracle.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("count", [0, -1])
    async def test_bad_bearing_count(
        self, origin: GeoPoint, walking_oracle: FakeOracle, count: int
    ) -> None:
        with pytest.raises(ValueError, match="bearing_count"):
            await search(walking_oracle, origin, TravelMode.WALKING, 3600, count)
        assert walking_oracle.calls == []

    @pytest.mark.asyncio
    async def test_negative_budget(self, origin: GeoPoint, walking_oracle: FakeOracle) -> None:
        with pytest.raises(ValueError, match="budget"):
            await search(walking_oracle, origin, TravelMode.WALKING, -60, 8)
        assert walking_oracle.calls == []

    @pytest.mark.asyncio
    async def test_bad_concurrency(self, origin: GeoPoint, walking_oracle: FakeOracle) -> None:
        with pytest.raises(ValueError, match="max_concurrency"):
            await search(walking_oracle, origin, TravelMode.WALKING, 3600, 8, max_concurrency=0)
        assert walking_oracle.calls == []

    @pytest.mark.asyncio
    async def test_unsupported_mode(self, origin: GeoPoint) -> None:
        oracle = WalkingOnlyOracle(constant_speed(WALKING_5KMH))
        with pytest.raises(ValueError, match="transit"):
            await search(oracle, origin, TravelMode.TRANSIT, 3600, 8)
        assert oracle.calls == []
