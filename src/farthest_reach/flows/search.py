"""
Prefect flow: search for the farthest reachable point, store it, map it.

Run locally (offline oracle, no API key needed):
    ORACLE=straight-line python -m farthest_reach.flows.search

Run with Prefect dashboard:
    prefect server start &
    python -m farthest_reach.flows.search
"""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from prefect import flow, task

from farthest_reach.budget import seconds_until_end_of_day
from farthest_reach.config import get_settings
from farthest_reach.oracles import create_oracle
from farthest_reach.renderers.reach_map import build_reach_map_html
from farthest_reach.schemas import SearchRequest, TravelMode
from farthest_reach.search import SearchParams, result_to_dict, search
from farthest_reach.store import DataStore

store = DataStore(Path(get_settings().data_dir))
SITE_DIR = store.derived / "site"

LATEST_PATH = Path("results/latest.json")
HISTORY_DIR = Path("results/history")
SITE_INDEX_PATH = Path("derived/site/index.html")


@task(name="run-search")
async def run_search(request: SearchRequest, oracle_name: str) -> dict[str, Any]:
    """Build the oracle and search all bearings."""
    settings = get_settings()
    oracle = create_oracle(oracle_name, settings)
    result = await search(
        oracle,
        request.origin,
        request.mode,
        request.budget_seconds,
        request.bearing_count,
        params=SearchParams(
            expansion_rounds=settings.expansion_rounds,
            bisection_rounds=settings.bisection_rounds,
        ),
        max_concurrency=settings.max_concurrency,
    )
    return result_to_dict(result)


@task(name="save-result")
def save_result(data: dict[str, Any], request: SearchRequest, oracle_name: str) -> Path:
    """Archive the result and replace ``results/latest.json``."""
    request_meta = request.model_dump(mode="json")
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S%fZ")
    store.write(HISTORY_DIR / f"{stamp}.json", data, source=oracle_name, request=request_meta)
    return store.write(LATEST_PATH, data, source=oracle_name, request=request_meta)


@task(name="render-map")
def render_map(data: dict[str, Any]) -> Path:
    """Render the Leaflet page into the derived site."""
    return store.write_text(SITE_INDEX_PATH, build_reach_map_html(data))


@flow(name="farthest-reach", log_prints=True)
async def search_flow(
    lat: float | None = None,
    lng: float | None = None,
    mode: str = "driving",
    budget_seconds: int | None = None,
    bearing_count: int | None = None,
    oracle: str | None = None,
) -> dict[str, Any]:
    """
    Search, save and render.

    Missing arguments fall back to settings; the budget defaults to the
    seconds left in today (in the configured timezone).
    """
    settings = get_settings()
    request = SearchRequest(
        lat=settings.lat if lat is None else lat,
        lng=settings.lng if lng is None else lng,
        mode=TravelMode(mode),
        budget_seconds=(
            seconds_until_end_of_day(tz=settings.timezone)
            if budget_seconds is None
            else budget_seconds
        ),
        bearing_count=settings.bearing_count if bearing_count is None else bearing_count,
    )
    oracle_name = oracle or settings.oracle

    print(
        f"Searching {request.bearing_count} bearings from ({request.lat}, {request.lng}) "
        f"by {request.mode} within {request.budget_seconds}s using {oracle_name}..."
    )
    data = await run_search(request, oracle_name)

    farthest = data["farthest"]
    if farthest is None:
        print("No reachable point found on any bearing.")
    else:
        print(
            f"Farthest: {farthest['distance_meters']} m at bearing "
            f"{farthest['bearing_deg']:.1f} in {farthest['duration_seconds']}s"
        )

    output_path = save_result(data, request, oracle_name)
    print(f"Saved result to {output_path}")
    map_path = render_map(data)
    print(f"Rendered map to {map_path}")

    return {
        "found": farthest is not None,
        "distance_meters": farthest["distance_meters"] if farthest else None,
        "output": str(output_path),
        "map": str(map_path),
    }


if __name__ == "__main__":
    asyncio.run(search_flow())
