"""
Domain Gateway - Metrics Backend

This module defines the gateway interface for retrieving historical
time series from a metrics backend through range queries.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from src.domain.entities.time_series import TimeSeries


class IMetricsGateway(ABC):
    """Interface for metrics backend gateways."""

    @abstractmethod
    async def query_range(
        self,
        expression: str,
        start: datetime,
        end: datetime,
        step: str,
    ) -> List[TimeSeries]:
        """
        Evaluate a range query over ``[start, end]`` at resolution ``step``.

        Args:
            expression: Query expression (e.g. "l4_total_bytes")
            start: Start of the queried range (inclusive)
            end: End of the queried range (inclusive)
            step: Resolution as a duration string (e.g. "6h")

        Returns:
            One TimeSeries per result, samples sorted by timestamp

        Raises:
            TransportError: When the backend cannot be reached
            QueryFailed: When the backend reports a non-success status
            MalformedSample: When a sample value cannot be decoded
        """
        pass
