"""
Application DTOs - Forecast

Data Transfer Objects exchanged between the forecast use cases and the
presentation layer.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.dataset import Dataset, LabeledSeries, SeriesKind
from src.domain.entities.quota import CycleWindow, QuotaParameters


class QuotaParametersDTO(BaseModel):
    """Effective parameters of the control law."""

    cap: float = Field(description="Monthly byte cap")
    grace_seconds: float = Field(description="Grace window in seconds")
    peak_rate: float = Field(description="Peak transfer rate in bytes per second")
    early_shift_bytes: float = Field(
        default=0.0, description="Extra allowance moved to the start of the cycle"
    )

    @classmethod
    def from_domain(cls, params: QuotaParameters) -> "QuotaParametersDTO":
        return cls(
            cap=params.cap,
            grace_seconds=params.grace_seconds,
            peak_rate=params.peak_rate,
            early_shift_bytes=params.early_shift_bytes,
        )


class ForecastRequestDTO(BaseModel):
    """Parameters for building a forecast dataset.

    Every field is optional; omitted values fall back to configuration.
    """

    start: Optional[datetime] = Field(default=None, description="Range start")
    end: Optional[datetime] = Field(default=None, description="Range end")
    sampling_interval: Optional[str] = Field(
        default=None, description="Query resolution, e.g. '6h'"
    )
    cap: Optional[float] = Field(default=None, description="Monthly byte cap")
    grace_seconds: Optional[float] = Field(
        default=None, description="Grace window in seconds"
    )
    peak_rate: Optional[float] = Field(
        default=None, description="Peak transfer rate in bytes per second"
    )
    early_shift_bytes: Optional[float] = Field(
        default=None, description="Extra early allowance in bytes"
    )


class SeriesPointDTO(BaseModel):
    """A single (x, y) point of a rendered series."""

    timestamp: datetime
    value: float


class SeriesDTO(BaseModel):
    """A labeled series of points."""

    label: str = Field(description="Display label, e.g. '2024-03 Usage Limit'")
    cycle_tag: str = Field(description="Billing cycle the series belongs to")
    kind: SeriesKind = Field(description="Observed or derived role of the series")
    derived: bool = Field(description="Whether the series is a forecast")
    points: List[SeriesPointDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, labeled: LabeledSeries) -> "SeriesDTO":
        return cls(
            label=labeled.label,
            cycle_tag=labeled.cycle_tag,
            kind=labeled.kind,
            derived=labeled.is_derived,
            points=[
                SeriesPointDTO(timestamp=s.timestamp, value=s.value)
                for s in labeled.series
            ],
        )


class ChartDTO(BaseModel):
    """A group of series rendered together."""

    series: List[SeriesDTO] = Field(default_factory=list)


class ForecastDatasetDTO(BaseModel):
    """DTO returned by the forecast endpoint."""

    generated_at: datetime
    start: datetime
    end: datetime
    sampling_interval: str
    parameters: QuotaParametersDTO
    cycle_tags: List[str] = Field(default_factory=list)
    usage: ChartDTO
    speed: ChartDTO

    @classmethod
    def from_domain(
        cls,
        dataset: Dataset,
        *,
        generated_at: datetime,
        start: datetime,
        end: datetime,
        sampling_interval: str,
        params: QuotaParameters,
    ) -> "ForecastDatasetDTO":
        return cls(
            generated_at=generated_at,
            start=start,
            end=end,
            sampling_interval=sampling_interval,
            parameters=QuotaParametersDTO.from_domain(params),
            cycle_tags=dataset.cycle_tags,
            usage=ChartDTO(
                series=[SeriesDTO.from_domain(s) for s in dataset.usage_series()]
            ),
            speed=ChartDTO(
                series=[SeriesDTO.from_domain(s) for s in dataset.speed_series()]
            ),
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "generated_at": "2024-03-31T12:00:00Z",
                "start": "2024-03-01T00:00:00Z",
                "end": "2024-03-31T00:00:00Z",
                "sampling_interval": "6h",
                "parameters": {
                    "cap": 1e12,
                    "grace_seconds": 3600,
                    "peak_rate": 4103250,
                    "early_shift_bytes": 0,
                },
                "cycle_tags": ["2024-03"],
                "usage": {
                    "series": [
                        {
                            "label": "2024-03 Usage",
                            "cycle_tag": "2024-03",
                            "kind": "usage",
                            "derived": False,
                            "points": [
                                {"timestamp": "2024-03-01T06:00:00Z", "value": 2.1e9}
                            ],
                        }
                    ]
                },
                "speed": {"series": []},
            }
        }
    }


class CycleWindowDTO(BaseModel):
    """Billing cycle enclosing an instant plus the forecast at that instant."""

    at: datetime
    start: datetime
    end: datetime
    duration_seconds: float
    elapsed_seconds: float
    moved_bytes: float = Field(description="Allowance granted at the cycle start")
    expected_usage: float = Field(description="Expected usage at the instant")
    parameters: QuotaParametersDTO

    @classmethod
    def from_domain(
        cls,
        at: datetime,
        window: CycleWindow,
        *,
        moved_bytes: float,
        expected_usage: float,
        params: QuotaParameters,
    ) -> "CycleWindowDTO":
        return cls(
            at=at,
            start=window.start,
            end=window.end,
            duration_seconds=window.duration_seconds,
            elapsed_seconds=window.elapsed_seconds,
            moved_bytes=moved_bytes,
            expected_usage=expected_usage,
            parameters=QuotaParametersDTO.from_domain(params),
        )
