"""
Prefect flows for the farthest-reach pipeline.

Flows:
- search: run the multi-bearing search, save the result, render the map

Usage (local):
    python -m farthest_reach.flows.search

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m farthest_reach.flows.search
"""
