"""Use cases for building quota forecasts from metrics telemetry."""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Awaitable, List, Optional, Tuple

from src.application.dtos.forecast_dto import (
    CycleWindowDTO,
    ForecastDatasetDTO,
    ForecastRequestDTO,
)
from src.application.models.forecast_defaults import ForecastDefaults
from src.domain.entities.dataset import Dataset
from src.domain.entities.errors import DomainError
from src.domain.entities.quota import QuotaParameters
from src.domain.entities.time_series import TimeSeries
from src.domain.gateways.metrics_gateway import IMetricsGateway
from src.domain.services.dataset_merger import merge_dataset
from src.domain.services.quota_model import QuotaModel
from src.domain.services.quota_validator import (
    validate_date_range,
    validate_quota_parameters,
    validate_sampling_interval,
)
from src.domain.services.series_validator import DEFAULT_CYCLE_LABEL, filter_by_since
from src.shared import get_logger

logger = get_logger(__name__)


async def _gather_all_or_nothing(
    *aws: Awaitable[List[TimeSeries]],
) -> List[List[TimeSeries]]:
    """Await every query; if one fails, cancel the rest and re-raise."""
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        # Drain the cancelled tasks so no exception is left unretrieved
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class ForecastPipeline:
    """Query usage and rate series, validate them and derive the forecast."""

    def __init__(
        self,
        metrics_gateway: IMetricsGateway,
        *,
        usage_query: str,
        rate_query_template: str,
        cycle_label: str = DEFAULT_CYCLE_LABEL,
        tz: Optional[tzinfo] = None,
    ) -> None:
        self._metrics_gateway = metrics_gateway
        self._usage_query = usage_query
        self._rate_query_template = rate_query_template
        self._cycle_label = cycle_label
        self._tz = tz

    def rate_query(self, sampling_interval: str) -> str:
        return self._rate_query_template.replace("{interval}", sampling_interval)

    async def build_dataset(
        self,
        params: QuotaParameters,
        sampling_interval: str,
        date_range: Tuple[datetime, datetime],
    ) -> Dataset:
        """Build the merged observed + forecast dataset for ``date_range``.

        Any failure aborts the whole build; no partial dataset is returned.
        """
        start, end = date_range
        validate_quota_parameters(params)
        step = validate_sampling_interval(sampling_interval)
        validate_date_range(start, end)

        log = logger.bind(start=start.isoformat(), end=end.isoformat(), step=step)

        rate_query = self.rate_query(step)

        try:
            usage_series, rate_series = await _gather_all_or_nothing(
                self._metrics_gateway.query_range(self._usage_query, start, end, step),
                self._metrics_gateway.query_range(rate_query, start, end, step),
            )

            usage_series = filter_by_since(usage_series, self._cycle_label, self._tz)
            rate_series = filter_by_since(rate_series, self._cycle_label, self._tz)

            dataset = merge_dataset(
                usage_series,
                rate_series,
                QuotaModel(params, self._tz),
                self._cycle_label,
            )
        except DomainError as exc:
            log.error(
                "forecast.dataset.failed",
                error_type=type(exc).__name__,
                error=exc.message,
                details=exc.details,
            )
            raise

        log.info(
            "forecast.dataset.built",
            cycles=dataset.cycle_tags,
            series=len(dataset.all_series()),
        )
        return dataset


class GetForecastUseCase:
    """Resolve request defaults and build the forecast dataset DTO."""

    def __init__(self, pipeline: ForecastPipeline, defaults: ForecastDefaults) -> None:
        self._pipeline = pipeline
        self._defaults = defaults

    def resolve_parameters(self, request: ForecastRequestDTO) -> QuotaParameters:
        base = self._defaults

        def pick(value: Optional[float], fallback: float) -> float:
            return fallback if value is None else value

        return QuotaParameters(
            cap=pick(request.cap, base.cap),
            grace_seconds=pick(request.grace_seconds, base.grace_seconds),
            peak_rate=pick(request.peak_rate, base.peak_rate),
            early_shift_bytes=pick(request.early_shift_bytes, base.early_shift_bytes),
        )

    def resolve_range(
        self, request: ForecastRequestDTO, now: datetime
    ) -> Tuple[datetime, datetime]:
        end = request.end or now
        start = request.start or end - timedelta(days=self._defaults.lookback_days)
        return _as_aware(start), _as_aware(end)

    async def execute(self, request: ForecastRequestDTO) -> ForecastDatasetDTO:
        now = datetime.now(timezone.utc)
        params = self.resolve_parameters(request)
        start, end = self.resolve_range(request, now)
        sampling_interval = request.sampling_interval or self._defaults.sampling_interval

        dataset = await self._pipeline.build_dataset(
            params, sampling_interval, (start, end)
        )

        return ForecastDatasetDTO.from_domain(
            dataset,
            generated_at=now,
            start=start,
            end=end,
            sampling_interval=sampling_interval.strip(),
            params=params,
        )


class GetCycleWindowUseCase:
    """Describe the billing cycle enclosing an instant."""

    def __init__(self, defaults: ForecastDefaults, tz: Optional[tzinfo] = None) -> None:
        self._defaults = defaults
        self._tz = tz

    async def execute(self, at: Optional[datetime] = None) -> CycleWindowDTO:
        instant = _as_aware(at) if at else datetime.now(timezone.utc)
        params = self._defaults.quota_parameters
        validate_quota_parameters(params)

        model = QuotaModel(params, self._tz)
        window = model.window(instant)
        return CycleWindowDTO.from_domain(
            instant,
            window,
            moved_bytes=model.moved_bytes(window.duration_seconds),
            expected_usage=model.expected_at(
                window.elapsed_seconds, window.duration_seconds
            ),
            params=params,
        )


def _as_aware(instant: datetime) -> datetime:
    # Naive request times are host local, the same rule the calendar uses
    if instant.tzinfo is None:
        return instant.astimezone()
    return instant
