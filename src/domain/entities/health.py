"""
Health domain entities.

Value objects describing how reachable the metrics backend is, since no
forecast can be produced while it is down.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


class ServiceStatus(str, Enum):
    """Availability of a dependency or of the whole service."""

    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"

    @classmethod
    def worst(cls, statuses: Iterable["ServiceStatus"]) -> "ServiceStatus":
        """Fold statuses with DOWN > DEGRADED > UNKNOWN > UP precedence."""
        seen = set(statuses)
        for candidate in (cls.DOWN, cls.DEGRADED, cls.UNKNOWN):
            if candidate in seen:
                return candidate
        return cls.UP


@dataclass(slots=True)
class DependencyStatus:
    """Outcome of probing one external dependency."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SystemHealth:
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)

    @classmethod
    def from_dependencies(cls, dependencies: List[DependencyStatus]) -> "SystemHealth":
        return cls(
            status=ServiceStatus.worst(dep.status for dep in dependencies),
            dependencies=dependencies,
        )

    @property
    def serving(self) -> bool:
        """Whether forecasts can currently be built."""
        return self.status is not ServiceStatus.DOWN
