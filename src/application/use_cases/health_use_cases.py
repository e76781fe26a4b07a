"""Use cases behind the /health and /info endpoints."""

from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from src.application.dtos.health_dto import (
    ApplicationInfoDTO,
    ForecastDefaultsInfoDTO,
    PrometheusInfoDTO,
    SystemHealthDTO,
)
from src.application.models import ForecastDefaults, SystemInfo
from src.domain.ports.health_check import IHealthCheckService


class GetHealthStatusUseCase:
    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> SystemHealthDTO:
        system_health = await self._health_check_service.evaluate()
        return SystemHealthDTO.from_domain(system_health)


class GetApplicationInfoUseCase:
    """Report service metadata, uptime, backend health and forecast defaults."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        system_info: SystemInfo,
        forecast_defaults: ForecastDefaults,
    ) -> None:
        self._health_check_service = health_check_service
        self._info = system_info
        self._defaults = forecast_defaults

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        system_health = await self._health_check_service.evaluate()

        now = datetime.now(timezone.utc)
        started = started_at or now

        return ApplicationInfoDTO(
            name=self._info.title,
            description=self._info.description,
            version=self._info.version,
            environment=self._info.environment,
            git_commit=self._info.git_commit,
            build_time=self._info.build_time,
            started_at=started,
            uptime_seconds=max(0.0, (now - started).total_seconds()),
            health=SystemHealthDTO.from_domain(system_health),
            prometheus=PrometheusInfoDTO(
                url=redact_url(self._info.prometheus_url),
                usage_query=self._info.usage_query,
                rate_query_template=self._info.rate_query_template,
                cycle_label=self._info.cycle_label,
            ),
            forecast=ForecastDefaultsInfoDTO(
                cap=self._defaults.cap,
                grace_seconds=self._defaults.grace_seconds,
                peak_rate=self._defaults.peak_rate,
                early_shift_bytes=self._defaults.early_shift_bytes,
                sampling_interval=self._defaults.sampling_interval,
                lookback_days=self._defaults.lookback_days,
                timezone=self._info.billing_timezone or "local",
            ),
        )


def redact_url(url: str) -> str:
    """Drop user info from ``url`` so it can be shown or logged."""
    parsed = urlsplit(url)
    if not (parsed.username or parsed.password):
        return url

    netloc = parsed.hostname or ""
    if parsed.port:
        netloc = f"{netloc}:{parsed.port}"
    return urlunsplit((parsed.scheme, netloc, parsed.path, parsed.query, parsed.fragment))
