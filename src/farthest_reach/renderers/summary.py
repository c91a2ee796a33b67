"""Plain-text summary of a search result."""

from __future__ import annotations

from typing import Any


def format_duration(seconds: float) -> str:
    """``"2h 05m"`` above an hour, ``"45m"`` below."""
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    minutes = rest // 60
    return f"{hours}h {minutes:02d}m" if hours > 0 else f"{minutes}m"


def format_km(meters: float) -> str:
    return f"{meters / 1000:.1f} km"


def build_summary_text(data: dict[str, Any]) -> str:
    """Multi-line report: request, farthest point, then one line per bearing."""
    origin = data["origin"]
    outcomes: list[dict[str, Any]] = data.get("outcomes", [])
    lines = [
        f"Origin:  {origin['lat']:.6f}, {origin['lng']:.6f}",
        f"Mode:    {data['mode']}",
        f"Budget:  {format_duration(data['budget_seconds'])}",
        "",
    ]

    farthest = data.get("farthest")
    if farthest is None:
        lines.append("No reachable point found on any bearing.")
    else:
        lines += [
            f"Farthest point: {farthest['lat']:.6f}, {farthest['lng']:.6f}",
            f"  distance: {format_km(farthest['distance_meters'])}",
            f"  duration: {format_duration(farthest['duration_seconds'])}",
            f"  bearing:  {round(farthest['bearing_deg'])}°",
        ]

    if outcomes:
        lines += ["", "Per bearing:"]
        for outcome in outcomes:
            bearing = f"{outcome['bearing_deg']:6.1f}°"
            if outcome.get("reachable"):
                lines.append(
                    f"  {bearing}  {format_km(outcome['distance_meters']):>10}"
                    f"  {format_duration(outcome['duration_seconds']):>8}"
                )
            else:
                lines.append(f"  {bearing}  unreachable")
    return "\n".join(lines)
