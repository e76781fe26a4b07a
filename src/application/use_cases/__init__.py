"""
Use Cases Package - Application Layer

The forecast pipeline plus the request-level use cases that resolve
defaults and shape responses.
"""

from .forecast_use_cases import (
    ForecastPipeline,
    GetCycleWindowUseCase,
    GetForecastUseCase,
)
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase

__all__ = [
    "ForecastPipeline",
    "GetForecastUseCase",
    "GetCycleWindowUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]
