"""Metrics gateway implementations."""

from .prometheus_gateway import PrometheusGateway

__all__ = ["PrometheusGateway"]
