"""Default time budget: what is left of today."""

from __future__ import annotations

import math
from datetime import datetime
from zoneinfo import ZoneInfo


def seconds_until_end_of_day(now: datetime | None = None, tz: str | None = None) -> int:
    """
    Whole seconds from ``now`` until 23:59:59.999 of the same local day.

    Args:
        now: Reference time. Naive values are taken as local to ``tz``.
            Defaults to the current time.
        tz: IANA timezone name. Defaults to the system local zone when
            ``now`` is also omitted, otherwise to ``now``'s own zone.

    Returns:
        Seconds left, floored and never negative.
    """
    zone = ZoneInfo(tz) if tz else None
    if now is None:
        now = datetime.now(zone) if zone else datetime.now().astimezone()
    elif now.tzinfo is None and zone is not None:
        now = now.replace(tzinfo=zone)
    elif zone is not None:
        now = now.astimezone(zone)

    end = now.replace(hour=23, minute=59, second=59, microsecond=999_000)
    return max(0, math.floor((end - now).total_seconds()))
