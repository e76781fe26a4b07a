"""DTOs for the /health and /info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth


class DependencyStatusDTO(BaseModel):
    name: str = Field(description="Dependency identifier")
    status: ServiceStatus
    message: Optional[str] = Field(default=None, description="Probe outcome")
    checked_at: datetime
    latency_ms: Optional[float] = Field(default=None, description="Probe latency")
    details: Dict[str, Any] = Field(
        default_factory=dict, description="Probed URL and per-path attempts"
    )

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            latency_ms=status.latency_ms,
            details=status.details,
        )


class SystemHealthDTO(BaseModel):
    """Payload of GET /health."""

    status: ServiceStatus = Field(description="Worst status among dependencies")
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in health.dependencies
            ],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "up",
                "dependencies": [
                    {
                        "name": "prometheus",
                        "status": "up",
                        "message": "HTTP 200",
                        "checked_at": "2024-03-09T12:00:00Z",
                        "latency_ms": 12.5,
                        "details": {
                            "url": "http://localhost:9090/-/ready",
                            "status_code": 200,
                        },
                    }
                ],
            }
        }
    }


class PrometheusInfoDTO(BaseModel):
    """Non-secret view of the metrics backend settings."""

    url: str = Field(description="Prometheus URL with credentials removed")
    usage_query: str
    rate_query_template: str
    cycle_label: str


class ForecastDefaultsInfoDTO(BaseModel):
    """Defaults applied when a forecast request omits a value."""

    cap: float
    grace_seconds: float
    peak_rate: float
    early_shift_bytes: float
    sampling_interval: str
    lookback_days: int
    timezone: str = Field(description="Billing calendar timezone, or 'local'")


class ApplicationInfoDTO(BaseModel):
    """Payload of GET /info."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    health: SystemHealthDTO
    prometheus: PrometheusInfoDTO
    forecast: ForecastDefaultsInfoDTO

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Bandwidth Quota Forecast",
                "description": "Forecasts monthly bandwidth usage",
                "version": "1.0.0",
                "environment": "development",
                "git_commit": "abcdef1",
                "build_time": "2024-03-09T11:30:00Z",
                "started_at": "2024-03-09T12:00:00Z",
                "uptime_seconds": 3600.5,
                "health": {"status": "up", "dependencies": []},
                "prometheus": {
                    "url": "http://localhost:9090",
                    "usage_query": "l4_total_bytes",
                    "rate_query_template": "rate(l4_total_bytes[{interval}])",
                    "cycle_label": "since",
                },
                "forecast": {
                    "cap": 1e12,
                    "grace_seconds": 3600,
                    "peak_rate": 4103250,
                    "early_shift_bytes": 0,
                    "sampling_interval": "6h",
                    "lookback_days": 30,
                    "timezone": "local",
                },
            }
        }
    }
