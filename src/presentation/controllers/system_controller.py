"""Operational endpoints: backend health and service metadata."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request, Response, status

from src.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.domain.entities.health import ServiceStatus
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get(
    "/health",
    response_model=SystemHealthDTO,
    responses={503: {"description": "Prometheus is unreachable"}},
)
@inject
async def health(
    response: Response,
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> SystemHealthDTO:
    """Probe Prometheus; answers 503 while it is down."""
    health_status = await get_health_status_use_case.execute()

    if health_status.status is ServiceStatus.DOWN:
        logger.warning(
            "health.backend.down",
            dependencies=[dep.name for dep in health_status.dependencies],
        )
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        logger.debug("health.check.success", status=health_status.status.value)
    return health_status


@router.get("/info", response_model=ApplicationInfoDTO)
@inject
async def info(
    request: Request,
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        Provide["get_application_info_use_case"]
    ),
) -> ApplicationInfoDTO:
    started_at = getattr(request.app.state, "started_at", None)
    info_response = await get_application_info_use_case.execute(started_at)
    logger.debug("info.retrieved", status=info_response.health.status.value)
    return info_response
