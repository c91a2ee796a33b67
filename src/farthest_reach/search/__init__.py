"""Farthest-reach search.

Public API:
  - models: ReachablePoint, AggregateResult, select_farthest, result_to_dict
  - radial: search_bearing, SearchParams, initial_upper_bound
  - orchestrator: search, bearing_angles
"""

from farthest_reach.search.models import (
    AggregateResult,
    ReachablePoint,
    SearchOutcome,
    result_to_dict,
    select_farthest,
)
from farthest_reach.search.orchestrator import bearing_angles, search
from farthest_reach.search.radial import SearchParams, initial_upper_bound, search_bearing

__all__ = [
    "AggregateResult",
    "ReachablePoint",
    "SearchOutcome",
    "SearchParams",
    "bearing_angles",
    "initial_upper_bound",
    "result_to_dict",
    "search",
    "search_bearing",
    "select_farthest",
]
