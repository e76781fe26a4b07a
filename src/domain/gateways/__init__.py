"""Gateway contracts for the metrics backend; implemented in infrastructure."""

from .metrics_gateway import IMetricsGateway

__all__ = ["IMetricsGateway"]
