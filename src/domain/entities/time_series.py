"""Domain entities for time-series telemetry."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from src.domain.entities.errors import SeriesOrderError

METRIC_NAME_LABEL = "__name__"


@dataclass(frozen=True, slots=True)
class Sample:
    """A single (timestamp, value) observation."""

    timestamp: datetime
    value: float


@dataclass(frozen=True, slots=True)
class TimeSeries:
    """An immutable, timestamp-ordered sequence of samples plus its labels.

    Timestamps must be strictly increasing; construction fails with
    ``SeriesOrderError`` otherwise.
    """

    labels: Mapping[str, str] = field(default_factory=dict)
    samples: Tuple[Sample, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))
        object.__setattr__(self, "samples", tuple(self.samples))

        previous: Optional[datetime] = None
        for sample in self.samples:
            if previous is not None and sample.timestamp <= previous:
                raise SeriesOrderError(
                    "Time series samples must have strictly increasing timestamps",
                    details={
                        "labels": dict(self.labels),
                        "previous": previous.isoformat(),
                        "timestamp": sample.timestamp.isoformat(),
                    },
                )
            previous = sample.timestamp

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

    @property
    def name(self) -> Optional[str]:
        return self.labels.get(METRIC_NAME_LABEL)

    @property
    def timestamps(self) -> Tuple[datetime, ...]:
        return tuple(sample.timestamp for sample in self.samples)

    def label(self, key: str) -> Optional[str]:
        return self.labels.get(key)

    def with_samples(self, samples: Iterable[Sample]) -> "TimeSeries":
        """Return a copy of this series carrying the same labels."""
        return TimeSeries(labels=dict(self.labels), samples=tuple(samples))
