"""
Domain Entities Package

This package contains the core domain entities and value objects.
"""

from .dataset import CycleGroup, Dataset, LabeledSeries, SeriesKind
from .errors import (
    DomainError,
    DuplicateCycleTag,
    ForecastConfigurationError,
    InvalidCycleTag,
    MalformedSample,
    MetricsGatewayError,
    QueryFailed,
    SeriesOrderError,
    TransportError,
)
from .health import DependencyStatus, ServiceStatus, SystemHealth
from .quota import CycleWindow, QuotaParameters
from .time_series import Sample, TimeSeries

__all__ = [
    "Sample",
    "TimeSeries",
    "CycleWindow",
    "QuotaParameters",
    "CycleGroup",
    "Dataset",
    "LabeledSeries",
    "SeriesKind",
    "SystemHealth",
    "DependencyStatus",
    "ServiceStatus",
    "DomainError",
    "MetricsGatewayError",
    "TransportError",
    "QueryFailed",
    "MalformedSample",
    "InvalidCycleTag",
    "DuplicateCycleTag",
    "SeriesOrderError",
    "ForecastConfigurationError",
]
