"""Calendar arithmetic for monthly billing cycles.

The cycle window is recomputed from the instant on every call; there is no
notion of a "current cycle" object to invalidate.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

from src.domain.entities.quota import CycleWindow


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """Resolve an IANA timezone name; empty values mean host local time."""
    if not name:
        return None
    return ZoneInfo(name)


def _month_start(year: int, month: int, tz: Optional[tzinfo]) -> datetime:
    if tz is None:
        # Naive wall-clock midnight resolved against the host timezone
        return datetime(year, month, 1).astimezone()
    return datetime(year, month, 1, tzinfo=tz)


def month_bounds(
    year: int, month: int, tz: Optional[tzinfo] = None
) -> Tuple[datetime, datetime]:
    """Return the first instant of ``year-month`` and of the following month."""
    next_year, next_month = (year + 1, 1) if month == 12 else (year, month + 1)
    return _month_start(year, month, tz), _month_start(next_year, next_month, tz)


def window_for(instant: datetime, tz: Optional[tzinfo] = None) -> CycleWindow:
    """Compute the billing cycle enclosing ``instant``.

    Args:
        instant: Point in time. Naive values are interpreted as host local time.
        tz: Billing timezone. ``None`` uses the host's local timezone.
    """
    local = instant.astimezone(tz)
    start, end = month_bounds(local.year, local.month, tz)
    start_ts = start.timestamp()
    return CycleWindow(
        start=start,
        end=end,
        duration_seconds=end.timestamp() - start_ts,
        elapsed_seconds=instant.timestamp() - start_ts,
    )
