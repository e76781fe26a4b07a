"""
Forecast Router - Presentation Layer

Exposes the quota forecast dataset and billing cycle details.
"""

from datetime import datetime
from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.application.dtos.forecast_dto import (
    CycleWindowDTO,
    ForecastDatasetDTO,
    ForecastRequestDTO,
)
from src.application.use_cases.forecast_use_cases import (
    GetCycleWindowUseCase,
    GetForecastUseCase,
)
from src.domain.entities.errors import (
    DomainError,
    ForecastConfigurationError,
    TransportError,
)
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/forecast", tags=["Forecast"])


def _status_for(exc: DomainError) -> int:
    if isinstance(exc, ForecastConfigurationError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if isinstance(exc, TransportError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_502_BAD_GATEWAY


@router.get(
    "",
    response_model=ForecastDatasetDTO,
    summary="Build the usage and speed-limit forecast",
    description="""
    Query cumulative usage and transfer rate for the date range, keep only the
    samples that belong to each series' billing cycle, and return observed
    series alongside the expected-usage and speed-limit forecasts.
    The request either returns the complete dataset or fails as a whole.
    """,
)
@inject
async def get_forecast(
    start: Optional[datetime] = Query(
        default=None, description="Range start (ISO8601); defaults to end - lookback"
    ),
    end: Optional[datetime] = Query(
        default=None, description="Range end (ISO8601); defaults to now"
    ),
    sampling_interval: Optional[str] = Query(
        default=None, description="Query resolution, e.g. '6h'"
    ),
    cap: Optional[float] = Query(default=None, description="Monthly byte cap"),
    grace_seconds: Optional[float] = Query(
        default=None, description="Grace window in seconds"
    ),
    peak_rate: Optional[float] = Query(
        default=None, description="Peak transfer rate in bytes per second"
    ),
    early_shift_bytes: Optional[float] = Query(
        default=None, description="Extra allowance moved to the cycle start"
    ),
    get_forecast_use_case: GetForecastUseCase = Depends(
        Provide["get_forecast_use_case"]
    ),
) -> ForecastDatasetDTO:
    request = ForecastRequestDTO(
        start=start,
        end=end,
        sampling_interval=sampling_interval,
        cap=cap,
        grace_seconds=grace_seconds,
        peak_rate=peak_rate,
        early_shift_bytes=early_shift_bytes,
    )
    logger.info("forecast.requested", **request.model_dump(exclude_none=True))

    try:
        return await get_forecast_use_case.execute(request)
    except DomainError as exc:
        raise HTTPException(status_code=_status_for(exc), detail=exc.message) from exc


@router.get(
    "/cycle",
    response_model=CycleWindowDTO,
    summary="Describe the billing cycle enclosing an instant",
)
@inject
async def get_cycle_window(
    at: Optional[datetime] = Query(
        default=None, description="Instant to evaluate (ISO8601); defaults to now"
    ),
    get_cycle_window_use_case: GetCycleWindowUseCase = Depends(
        Provide["get_cycle_window_use_case"]
    ),
) -> CycleWindowDTO:
    try:
        return await get_cycle_window_use_case.execute(at)
    except DomainError as exc:
        raise HTTPException(status_code=_status_for(exc), detail=exc.message) from exc
