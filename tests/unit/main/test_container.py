from __future__ import annotations

import asyncio

import pytest
from dependency_injector import providers

from src.application.use_cases.forecast_use_cases import (
    GetCycleWindowUseCase,
    GetForecastUseCase,
)
from src.infrastructure.gateways.prometheus_gateway import PrometheusGateway
from src.main.config import AppSettings
from src.main.container import app_lifespan, get_container, init_container
from tests.conftest import StubMetricsGateway


@pytest.mark.asyncio
async def test_init_and_get_container(monkeypatch) -> None:
    monkeypatch.setenv("PROMETHEUS_URL", "http://prom:9090/")
    settings = AppSettings()
    container = init_container(settings)
    assert get_container() is container

    gateway = container.metrics_gateway()
    assert isinstance(gateway, PrometheusGateway)
    assert gateway.base_url == "http://prom:9090"
    assert container.billing_timezone() is None

    async with app_lifespan():
        pass


@pytest.mark.asyncio
async def test_container_builds_use_cases(monkeypatch) -> None:
    monkeypatch.setenv("QUOTA_TIMEZONE", "UTC")
    container = init_container(AppSettings())
    container.metrics_gateway.override(providers.Object(StubMetricsGateway()))

    forecast = container.get_forecast_use_case()
    cycle = container.get_cycle_window_use_case()

    assert isinstance(forecast, GetForecastUseCase)
    assert isinstance(cycle, GetCycleWindowUseCase)
    assert str(container.billing_timezone()) == "UTC"
    assert container.forecast_defaults().sampling_interval == "6h"

    async with app_lifespan() as resolved:
        await asyncio.sleep(0)
        assert resolved is container


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("src.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
