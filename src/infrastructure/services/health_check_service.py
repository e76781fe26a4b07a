"""Health probe for the Prometheus server backing the forecast."""

from __future__ import annotations

from datetime import datetime, timezone
from time import perf_counter
from typing import Any, Dict, List, Sequence
from urllib.parse import urljoin

import httpx

from src.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth
from src.domain.ports.health_check import IHealthCheckService

# Readiness first; older servers only answer on the root path
PROMETHEUS_HEALTH_PATHS = ("/-/ready", "/-/healthy", "/")


class HealthCheckService(IHealthCheckService):
    """Probe Prometheus over HTTP, falling back across its health paths."""

    def __init__(
        self,
        prometheus_url: str,
        *,
        http_timeout: float = 5.0,
        probe_paths: Sequence[str] = PROMETHEUS_HEALTH_PATHS,
    ) -> None:
        self._prometheus_url = prometheus_url
        self._http_timeout = http_timeout
        self._probe_paths = tuple(probe_paths)

    async def evaluate(self) -> SystemHealth:
        return SystemHealth.from_dependencies([await self.probe_prometheus()])

    async def probe_prometheus(self) -> DependencyStatus:
        """Try each health path until one does not report DOWN."""
        if not self._prometheus_url:
            return DependencyStatus(
                name="prometheus",
                status=ServiceStatus.UNKNOWN,
                message="Prometheus URL not configured.",
            )

        attempts: List[Dict[str, Any]] = []
        result = DependencyStatus(
            name="prometheus",
            status=ServiceStatus.UNKNOWN,
            message="No health path configured.",
        )
        async with httpx.AsyncClient(timeout=self._http_timeout) as client:
            for path in self._probe_paths:
                result = await self._probe(client, self._join(path))
                attempts.append(
                    {
                        "path": path,
                        "status": result.status.value,
                        "message": result.message,
                        "checked_at": datetime.now(timezone.utc).isoformat(),
                    }
                )
                if result.status is not ServiceStatus.DOWN:
                    break

        result.details["attempts"] = attempts
        return result

    async def _probe(self, client: Any, url: str) -> DependencyStatus:
        start = perf_counter()
        try:
            response = await client.get(url)
        except httpx.RequestError as exc:
            return DependencyStatus(
                name="prometheus",
                status=ServiceStatus.DOWN,
                message=f"HTTP request failed: {exc}",
                latency_ms=(perf_counter() - start) * 1000,
                details={"url": url},
            )

        return DependencyStatus(
            name="prometheus",
            status=self._status_for_code(response.status_code),
            message=f"HTTP {response.status_code}",
            latency_ms=(perf_counter() - start) * 1000,
            details={"url": url, "status_code": response.status_code},
        )

    @staticmethod
    def _status_for_code(status_code: int) -> ServiceStatus:
        if status_code >= 500:
            return ServiceStatus.DOWN
        if status_code >= 400:
            return ServiceStatus.DEGRADED
        return ServiceStatus.UP

    def _join(self, path: str) -> str:
        if not path:
            return self._prometheus_url
        base = self._prometheus_url.rstrip("/") + "/"
        return urljoin(base, path.lstrip("/"))
