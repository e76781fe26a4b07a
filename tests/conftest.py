from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.domain.entities.quota import QuotaParameters  # noqa: E402
from src.domain.entities.time_series import Sample, TimeSeries  # noqa: E402
from src.domain.gateways.metrics_gateway import IMetricsGateway  # noqa: E402


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def make_series(
    points: Iterable[Tuple[datetime, float]], **labels: str
) -> TimeSeries:
    return TimeSeries(
        labels=labels,
        samples=tuple(Sample(timestamp=ts, value=value) for ts, value in points),
    )


class StubMetricsGateway(IMetricsGateway):
    """Returns canned series per expression and records every query."""

    def __init__(
        self,
        responses: dict[str, Sequence[TimeSeries]] | None = None,
        errors: dict[str, Exception] | None = None,
    ) -> None:
        self.responses = dict(responses or {})
        self.errors = dict(errors or {})
        self.calls: List[Tuple[str, datetime, datetime, str]] = []

    async def query_range(
        self, expression: str, start: datetime, end: datetime, step: str
    ) -> List[TimeSeries]:
        self.calls.append((expression, start, end, step))
        if expression in self.errors:
            raise self.errors[expression]
        return list(self.responses.get(expression, []))


@pytest.fixture()
def quota_params() -> QuotaParameters:
    return QuotaParameters(
        cap=1e12,
        grace_seconds=3600,
        peak_rate=4103250,
        early_shift_bytes=0,
    )


@pytest.fixture()
def march_usage() -> TimeSeries:
    return make_series(
        [
            (utc(2024, 2, 29, 18), 9.9e11),
            (utc(2024, 3, 1, 6), 2.0e9),
            (utc(2024, 3, 1, 12), 5.0e9),
            (utc(2024, 3, 1, 18), 9.0e9),
        ],
        __name__="l4_total_bytes",
        since="2024-03",
    )


@pytest.fixture()
def march_rate() -> TimeSeries:
    return make_series(
        [
            (utc(2024, 2, 29, 18), 1.5e5),
            (utc(2024, 3, 1, 6), 9.0e4),
            (utc(2024, 3, 1, 12), 1.4e5),
            (utc(2024, 3, 1, 18), 1.9e5),
        ],
        since="2024-03",
    )


@pytest.fixture()
def dummy_now() -> datetime:
    return datetime.now(timezone.utc)
