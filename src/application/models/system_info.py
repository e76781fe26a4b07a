"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration required by system-related use cases."""

    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    prometheus_url: str
    usage_query: str
    rate_query_template: str
    cycle_label: str
    billing_timezone: Optional[str]
