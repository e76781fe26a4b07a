"""Domain service for validating series against their cycle-tag label."""

from __future__ import annotations

import re
from datetime import tzinfo
from typing import Iterable, List, Optional, Tuple

from src.domain.entities.errors import InvalidCycleTag
from src.domain.entities.time_series import TimeSeries
from src.domain.services.calendar_cycle import month_bounds

DEFAULT_CYCLE_LABEL = "since"

_CYCLE_TAG_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def parse_cycle_tag(tag: Optional[str], label: str = DEFAULT_CYCLE_LABEL) -> Tuple[int, int]:
    """Parse a ``YYYY-MM`` cycle-tag into ``(year, month)``.

    Raises:
        InvalidCycleTag: If the tag is missing or not a valid month.
    """
    if tag is None:
        raise InvalidCycleTag(None, label)

    match = _CYCLE_TAG_PATTERN.match(tag.strip())
    if not match:
        raise InvalidCycleTag(tag, label)

    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise InvalidCycleTag(tag, label)
    return year, month


def cycle_tag_of(series: TimeSeries, label: str = DEFAULT_CYCLE_LABEL) -> str:
    """Return the normalised cycle-tag carried by ``series``."""
    year, month = parse_cycle_tag(series.label(label), label)
    return f"{year:04d}-{month:02d}"


def filter_by_since(
    series: Iterable[TimeSeries],
    label: str = DEFAULT_CYCLE_LABEL,
    tz: Optional[tzinfo] = None,
) -> List[TimeSeries]:
    """Keep only the samples that fall inside each series' own cycle.

    Every input series is emitted, even when no sample survives, so the
    output has the same shape as the input.

    Raises:
        InvalidCycleTag: If any series lacks a parseable cycle-tag.
    """
    result: List[TimeSeries] = []
    for item in series:
        year, month = parse_cycle_tag(item.label(label), label)
        start, end = month_bounds(year, month, tz)
        result.append(
            item.with_samples(s for s in item if start <= s.timestamp < end)
        )
    return result
