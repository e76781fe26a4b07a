"""
Infrastructure Gateway - Prometheus Implementation

This module implements the metrics gateway on top of the Prometheus HTTP
API range-query endpoint (``/api/v1/query_range``).
"""

import math
from datetime import datetime, timezone
from typing import Any, Dict, List

import httpx

from src.domain.entities.errors import (
    MalformedSample,
    QueryFailed,
    SeriesOrderError,
    TransportError,
)
from src.domain.entities.time_series import Sample, TimeSeries
from src.domain.gateways.metrics_gateway import IMetricsGateway
from src.shared import get_logger

logger = get_logger(__name__)

QUERY_RANGE_PATH = "/api/v1/query_range"


def _format_instant(instant: datetime) -> str:
    return instant.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


class PrometheusGateway(IMetricsGateway):
    """Metrics gateway backed by a Prometheus server."""

    def __init__(self, base_url: str, timeout: float = 30.0):
        """
        Initialize Prometheus gateway.

        Args:
            base_url: Base URL of the Prometheus server (e.g. "http://prometheus:9090")
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def query_range(
        self,
        expression: str,
        start: datetime,
        end: datetime,
        step: str,
    ) -> List[TimeSeries]:
        """Evaluate a range query and decode the matrix result."""

        url = f"{self.base_url}{QUERY_RANGE_PATH}"
        params = {
            "query": expression,
            "start": _format_instant(start),
            "end": _format_instant(end),
            "step": step,
        }

        logger.info("prometheus.query.start", url=url, params=params)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params)
        except httpx.RequestError as e:
            logger.error("prometheus.query.transport_error", error=str(e), url=url)
            raise TransportError(
                f"Prometheus request failed: {e}",
                details={"url": url, "query": expression},
            ) from e

        payload = self._decode_payload(response, expression)
        result = self._parse_matrix(payload, expression)

        logger.info(
            "prometheus.query.success",
            query=expression,
            series=len(result),
            samples=sum(len(series) for series in result),
        )
        return result

    def _decode_payload(self, response: Any, expression: str) -> Dict[str, Any]:
        try:
            payload = response.json()
        except ValueError as e:
            logger.error(
                "prometheus.query.invalid_body",
                status_code=response.status_code,
                response_text=response.text,
            )
            raise QueryFailed(
                f"Prometheus returned HTTP {response.status_code} "
                f"with an unreadable body",
                details={"query": expression, "status_code": response.status_code},
            ) from e

        status = payload.get("status") if isinstance(payload, dict) else None
        if status != "success":
            error_type = payload.get("errorType") if isinstance(payload, dict) else None
            error = payload.get("error") if isinstance(payload, dict) else None
            logger.error(
                "prometheus.query.failed",
                query=expression,
                status=status,
                status_code=response.status_code,
                error_type=error_type,
                error=error,
            )
            message = "Query failed!"
            if error:
                message = f"Query failed: {error_type or 'error'}: {error}"
            raise QueryFailed(
                message,
                error_type=error_type,
                details={
                    "query": expression,
                    "status": status,
                    "status_code": response.status_code,
                    "error": error,
                },
            )

        return payload

    def _parse_matrix(self, payload: Dict[str, Any], expression: str) -> List[TimeSeries]:
        data = payload.get("data") or {}
        result_type = data.get("resultType", "matrix")
        if result_type != "matrix":
            raise QueryFailed(
                f"Expected a matrix result, got {result_type!r}",
                details={"query": expression, "result_type": result_type},
            )

        series_list: List[TimeSeries] = []
        for entry in data.get("result", []):
            labels = {str(k): str(v) for k, v in (entry.get("metric") or {}).items()}
            samples = [self._parse_sample(pair, labels) for pair in entry.get("values", [])]
            samples.sort(key=lambda sample: sample.timestamp)
            try:
                series_list.append(TimeSeries(labels=labels, samples=tuple(samples)))
            except SeriesOrderError as e:
                raise MalformedSample(
                    "Duplicate sample timestamps in Prometheus response",
                    details={"query": expression, **e.details},
                ) from e
        return series_list

    @staticmethod
    def _parse_sample(pair: Any, labels: Dict[str, str]) -> Sample:
        try:
            raw_ts, raw_value = pair
        except (TypeError, ValueError) as e:
            raise MalformedSample(
                f"Expected a [timestamp, value] pair, got {pair!r}",
                details={"labels": labels},
            ) from e

        try:
            timestamp = datetime.fromtimestamp(float(raw_ts), tz=timezone.utc)
        except (TypeError, ValueError, OverflowError, OSError) as e:
            raise MalformedSample(
                f"Invalid sample timestamp {raw_ts!r}",
                details={"labels": labels},
            ) from e

        try:
            value = float(raw_value)
        except (TypeError, ValueError) as e:
            raise MalformedSample(
                f"Non-numeric sample value {raw_value!r}",
                details={"labels": labels, "timestamp": timestamp.isoformat()},
            ) from e

        # NaN and Inf parse as floats but carry no usable reading
        if not math.isfinite(value):
            raise MalformedSample(
                f"Non-finite sample value {raw_value!r}",
                details={"labels": labels, "timestamp": timestamp.isoformat()},
            )

        return Sample(timestamp=timestamp, value=value)
