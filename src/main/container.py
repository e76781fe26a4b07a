"""
Dependency container - Main Layer

Wires settings into the Prometheus gateway, the forecast pipeline and the
use cases served by the routers.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.models import ForecastDefaults, SystemInfo
from src.application.use_cases.forecast_use_cases import (
    ForecastPipeline,
    GetCycleWindowUseCase,
    GetForecastUseCase,
)
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
    redact_url,
)
from src.domain.services.calendar_cycle import resolve_timezone
from src.infrastructure.gateways.prometheus_gateway import PrometheusGateway
from src.infrastructure.services.health_check_service import HealthCheckService
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition root for the forecast service."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    billing_timezone = providers.Singleton(
        resolve_timezone,
        config.quota.timezone,
    )

    forecast_defaults = providers.Singleton(
        ForecastDefaults,
        cap=config.quota.cap,
        grace_seconds=config.quota.grace_seconds,
        peak_rate=config.quota.peak_rate,
        early_shift_bytes=config.quota.early_shift_bytes,
        sampling_interval=config.forecast.sampling_interval,
        lookback_days=config.forecast.lookback_days,
    )

    # Gateways
    metrics_gateway = providers.Singleton(
        PrometheusGateway,
        base_url=config.prometheus.url,
        timeout=config.prometheus.timeout,
    )

    # Forecast
    forecast_pipeline = providers.Factory(
        ForecastPipeline,
        metrics_gateway=metrics_gateway,
        usage_query=config.prometheus.usage_query,
        rate_query_template=config.prometheus.rate_query_template,
        cycle_label=config.prometheus.cycle_label,
        tz=billing_timezone,
    )

    get_forecast_use_case = providers.Factory(
        GetForecastUseCase,
        pipeline=forecast_pipeline,
        defaults=forecast_defaults,
    )

    get_cycle_window_use_case = providers.Factory(
        GetCycleWindowUseCase,
        defaults=forecast_defaults,
        tz=billing_timezone,
    )

    # System
    health_check_service = providers.Singleton(
        HealthCheckService,
        prometheus_url=config.prometheus.url,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.ge.title,
        description=config.ge.description,
        version=config.ge.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.ge.git_commit,
        build_time=config.ge.build_time,
        prometheus_url=config.prometheus.url,
        usage_query=config.prometheus.usage_query,
        rate_query_template=config.prometheus.rate_query_template,
        cycle_label=config.prometheus.cycle_label,
        billing_timezone=config.quota.timezone,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
        forecast_defaults=forecast_defaults,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    Resolves the billing timezone and metrics gateway eagerly so that
    configuration errors surface at startup rather than on first request.
    """
    container = get_container()

    try:
        tz = container.billing_timezone()
        container.metrics_gateway()
        logger.info(
            "container.resources.initialized",
            prometheus_url=redact_url(container.config.prometheus.url()),
            billing_timezone=str(tz) if tz else "local",
        )
        yield container

    finally:
        logger.info("container.resources.shutdown")
