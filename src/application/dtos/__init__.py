"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .forecast_dto import (
    ChartDTO,
    CycleWindowDTO,
    ForecastDatasetDTO,
    ForecastRequestDTO,
    QuotaParametersDTO,
    SeriesDTO,
    SeriesPointDTO,
)
from .health_dto import (
    ApplicationInfoDTO,
    DependencyStatusDTO,
    ForecastDefaultsInfoDTO,
    PrometheusInfoDTO,
    SystemHealthDTO,
)

__all__ = [
    "ChartDTO",
    "CycleWindowDTO",
    "ForecastDatasetDTO",
    "ForecastRequestDTO",
    "QuotaParametersDTO",
    "SeriesDTO",
    "SeriesPointDTO",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "ApplicationInfoDTO",
    "PrometheusInfoDTO",
    "ForecastDefaultsInfoDTO",
]
