"""
Domain Errors

This module defines the error taxonomy raised while retrieving telemetry
and building quota forecasts.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class MetricsGatewayError(DomainError):
    """Base class for failures while querying the metrics backend."""


class TransportError(MetricsGatewayError):
    """Raised when the metrics backend cannot be reached or times out."""


class QueryFailed(MetricsGatewayError):
    """Raised when the metrics backend reports a non-success status."""

    def __init__(
        self,
        message: str,
        error_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.error_type = error_type
        super().__init__(message, details)


class MalformedSample(MetricsGatewayError):
    """Raised when a sample in a query response cannot be decoded."""


class InvalidCycleTag(DomainError):
    """Raised when a series' cycle-tag label is missing or unparseable."""

    def __init__(
        self,
        tag: Optional[str],
        label: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.tag = tag
        self.label = label
        if tag is None:
            message = f"Series is missing the '{label}' cycle-tag label"
        else:
            message = (
                f"Invalid cycle-tag {label}={tag!r}: expected a 'YYYY-MM' month"
            )
        super().__init__(message, details)


class SeriesOrderError(DomainError):
    """Raised when a time series is not strictly ordered by timestamp."""


class ForecastConfigurationError(DomainError):
    """Raised when quota parameters or sampling options are invalid."""


class DuplicateCycleTag(DomainError):
    """Raised when two series of the same kind claim the same cycle."""

    def __init__(self, tag: str, details: Optional[Dict[str, Any]] = None):
        self.tag = tag
        super().__init__(f"More than one series is tagged with cycle {tag}", details)
