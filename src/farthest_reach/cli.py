"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import asyncio
import functools
import http.server
import json
import logging
import sys
from pathlib import Path

from farthest_reach import __version__
from farthest_reach.budget import seconds_until_end_of_day
from farthest_reach.config import get_settings
from farthest_reach.flows.search import LATEST_PATH, SITE_DIR, search_flow, store
from farthest_reach.oracles import ORACLE_NAMES, OracleUnavailableError, create_oracle
from farthest_reach.renderers.geojson import build_feature_collection
from farthest_reach.renderers.summary import build_summary_text
from farthest_reach.schemas import SearchRequest, TravelMode
from farthest_reach.search import SearchParams, result_to_dict, search

MIN_BEARINGS = 6
MAX_BEARINGS = 24


def clamp_bearings(count: int) -> int:
    """Keep the bearing count within the range the search is tuned for."""
    return max(MIN_BEARINGS, min(MAX_BEARINGS, count))


def _add_search_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lat", type=float, default=None, help="Origin latitude (default: settings)")
    parser.add_argument("--lng", type=float, default=None, help="Origin longitude (default: settings)")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in TravelMode],
        default=TravelMode.DRIVING.value,
        help="Travel mode (default: driving)",
    )
    parser.add_argument(
        "--budget",
        type=int,
        default=None,
        help="Time budget in seconds (default: time left today)",
    )
    parser.add_argument(
        "--bearings",
        type=int,
        default=None,
        help=f"Number of bearings, clamped to {MIN_BEARINGS}-{MAX_BEARINGS} (default: settings)",
    )
    parser.add_argument(
        "--oracle",
        choices=ORACLE_NAMES,
        default=None,
        help="Travel-time oracle (default: settings)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="farthest-reach",
        description="Find the farthest point reachable within a travel-time budget",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'search' command - run the search and print a summary
    search_parser = subparsers.add_parser("search", help="Search and print the result")
    _add_search_arguments(search_parser)
    search_parser.add_argument(
        "--concurrency",
        type=int,
        default=None,
        help="Bearings searched at once (default: settings; 1 = sequential)",
    )
    search_parser.add_argument(
        "--geojson",
        type=Path,
        default=None,
        help="Also write the result as GeoJSON to this file",
    )

    # 'map' command - run the Prefect flow (search, save, render)
    map_parser = subparsers.add_parser("map", help="Search, save the result and render the map")
    _add_search_arguments(map_parser)

    # 'latest' command - show the last stored result
    subparsers.add_parser("latest", help="Show the last result saved by 'map'")

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    # 'serve' command - serve rendered map locally
    serve_parser = subparsers.add_parser("serve", help="Serve the rendered map locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def cmd_search(args: argparse.Namespace) -> int:
    """Handle the 'search' command."""
    settings = get_settings()
    concurrency = settings.max_concurrency if args.concurrency is None else args.concurrency

    try:
        request = SearchRequest(
            lat=settings.lat if args.lat is None else args.lat,
            lng=settings.lng if args.lng is None else args.lng,
            mode=TravelMode(args.mode),
            budget_seconds=(
                seconds_until_end_of_day(tz=settings.timezone)
                if args.budget is None
                else args.budget
            ),
            bearing_count=clamp_bearings(
                settings.bearing_count if args.bearings is None else args.bearings
            ),
        )
        oracle = create_oracle(args.oracle or settings.oracle, settings)
        result = asyncio.run(
            search(
                oracle,
                request.origin,
                request.mode,
                request.budget_seconds,
                request.bearing_count,
                params=SearchParams(
                    expansion_rounds=settings.expansion_rounds,
                    bisection_rounds=settings.bisection_rounds,
                ),
                max_concurrency=concurrency,
            )
        )
    except (ValueError, OracleUnavailableError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    data = result_to_dict(result)
    print(build_summary_text(data))

    if args.geojson is not None:
        args.geojson.parent.mkdir(parents=True, exist_ok=True)
        args.geojson.write_text(json.dumps(build_feature_collection(data), indent=2))
        print(f"GeoJSON written to {args.geojson}")

    return 0 if result.found else 1


def cmd_map(args: argparse.Namespace) -> int:
    """Handle the 'map' command: run the search flow."""
    settings = get_settings()
    bearings = clamp_bearings(settings.bearing_count if args.bearings is None else args.bearings)
    try:
        summary = asyncio.run(
            search_flow(
                lat=args.lat,
                lng=args.lng,
                mode=args.mode,
                budget_seconds=args.budget,
                bearing_count=bearings,
                oracle=args.oracle,
            )
        )
    except (ValueError, OracleUnavailableError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(f"Map: {summary['map']}")
    return 0 if summary["found"] else 1


def cmd_latest(_args: argparse.Namespace) -> int:
    """Handle the 'latest' command: print the stored result without searching."""
    envelope = store.read_raw(LATEST_PATH)
    if envelope is None:
        print("No saved result. Run 'farthest-reach map' first.", file=sys.stderr)
        return 1

    meta = envelope.get("meta", {})
    data = envelope["data"]
    print(f"Saved {meta.get('written_at', '?')} by {meta.get('source', '?')} oracle")
    print(build_summary_text(data))
    print(f"Runs archived: {len(store.history_paths())}")
    return 0 if data.get("farthest") else 1


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Default origin: {settings.lat}, {settings.lng}")
    print(f"Oracle: {settings.oracle}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the rendered map locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = Path(SITE_DIR)

    if not site_dir.exists():
        print("No site directory found. Run 'farthest-reach map' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving map on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    debug = args.debug or get_settings().debug
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "search": cmd_search,
        "map": cmd_map,
        "latest": cmd_latest,
        "info": cmd_info,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
