from __future__ import annotations

import httpx
import pytest

from src.domain.entities.health import ServiceStatus
from src.infrastructure.services.health_check_service import HealthCheckService


class _Response:
    def __init__(self, status_code: int):
        self.status_code = status_code


class _Client:
    def __init__(self, outcomes):
        self._outcomes = iter(outcomes)
        self.urls: list[str] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None

    async def get(self, url, headers=None):
        self.urls.append(url)
        outcome = next(self._outcomes)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def test_join_handles_trailing_slash() -> None:
    service = HealthCheckService("http://prometheus:9090/")
    assert service._join("/-/ready") == "http://prometheus:9090/-/ready"
    assert service._join("") == "http://prometheus:9090/"


def test_join_keeps_path_prefix() -> None:
    service = HealthCheckService("http://proxy/prometheus")
    assert service._join("/-/healthy") == "http://proxy/prometheus/-/healthy"


@pytest.mark.asyncio
async def test_evaluate_reports_prometheus_up(monkeypatch) -> None:
    client = _Client([_Response(200)])
    monkeypatch.setattr("httpx.AsyncClient", lambda timeout: client)

    health = await HealthCheckService("http://prometheus:9090").evaluate()

    assert health.status is ServiceStatus.UP
    assert [d.name for d in health.dependencies] == ["prometheus"]
    assert client.urls == ["http://prometheus:9090/-/ready"]


@pytest.mark.asyncio
async def test_evaluate_falls_back_across_paths(monkeypatch) -> None:
    client = _Client([_Response(503), _Response(200)])
    monkeypatch.setattr("httpx.AsyncClient", lambda timeout: client)

    health = await HealthCheckService("http://prometheus").evaluate()

    assert health.status is ServiceStatus.UP
    assert client.urls == ["http://prometheus/-/ready", "http://prometheus/-/healthy"]
    assert len(health.dependencies[0].details["attempts"]) == 2


@pytest.mark.asyncio
async def test_evaluate_reports_down_when_unreachable(monkeypatch) -> None:
    request = httpx.Request("GET", "http://prometheus")
    error = httpx.ConnectError("refused", request=request)
    monkeypatch.setattr(
        "httpx.AsyncClient", lambda timeout: _Client([error, error, error])
    )

    health = await HealthCheckService("http://prometheus").evaluate()

    assert health.status is ServiceStatus.DOWN
    assert "HTTP request failed" in health.dependencies[0].message


@pytest.mark.asyncio
async def test_missing_url_is_unknown() -> None:
    health = await HealthCheckService("").evaluate()
    assert health.status is ServiceStatus.UNKNOWN
