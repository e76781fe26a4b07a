"""Domain services package."""

from .calendar_cycle import month_bounds, resolve_timezone, window_for
from .quota_model import QuotaModel
from .series_validator import cycle_tag_of, filter_by_since, parse_cycle_tag

__all__ = [
    "QuotaModel",
    "cycle_tag_of",
    "filter_by_since",
    "month_bounds",
    "parse_cycle_tag",
    "resolve_timezone",
    "window_for",
]
