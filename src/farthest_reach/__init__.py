"""Farthest Reach - the farthest point reachable within a travel-time budget.

Architecture::

    geo.py         Spherical primitives (GeoPoint, destination point, haversine)
    schemas.py     TravelMode and validated search requests
    oracles/       Travel-time oracles (Google Directions, OpenRouteService, offline)
    search/        Radial bisection per bearing + multi-bearing orchestration
    budget.py      Default time budget (seconds left in the day)
    store.py       JSON result store with metadata envelope
    renderers/     Pure data → text / GeoJSON / HTML
    flows/         Prefect orchestration (search, save, render)
    services/      Shared utilities (HTTP client with retry)

Data flow: oracle ← search (radial ← orchestrator) → store → renderers → derived/site/
"""

__version__ = "0.1.0"
__author__ = "Michael Howden"

from farthest_reach.config import Settings
from farthest_reach.geo import GeoPoint, destination_point
from farthest_reach.schemas import SearchRequest, TravelMode
from farthest_reach.search import AggregateResult, ReachablePoint, search, search_bearing

__all__ = [
    "AggregateResult",
    "GeoPoint",
    "ReachablePoint",
    "SearchRequest",
    "Settings",
    "TravelMode",
    "__version__",
    "destination_point",
    "search",
    "search_bearing",
]
