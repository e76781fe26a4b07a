"""Port for probing the dependencies the forecast relies on."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    async def evaluate(self) -> SystemHealth:
        """Probe the metrics backend and report the aggregated status."""
        ...
