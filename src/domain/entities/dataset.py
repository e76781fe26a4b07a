"""
Dataset domain entities.

The forecast dataset groups observed and derived series by the billing
cycle they belong to, so that cycles with different sample counts never
depend on positional alignment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from src.domain.entities.time_series import TimeSeries


class SeriesKind(str, Enum):
    """Role of a series inside the dataset."""

    USAGE = "usage"
    USAGE_LIMIT = "usage_limit"
    RATE = "rate"
    SPEED_LIMIT = "speed_limit"


SERIES_LABEL_SUFFIXES: Dict[SeriesKind, str] = {
    SeriesKind.USAGE: "Usage",
    SeriesKind.USAGE_LIMIT: "Usage Limit",
    SeriesKind.RATE: "Used Speed",
    SeriesKind.SPEED_LIMIT: "Speed Limit",
}


@dataclass(frozen=True, slots=True)
class LabeledSeries:
    """A series ready for rendering, tagged with its cycle and role."""

    cycle_tag: str
    kind: SeriesKind
    series: TimeSeries

    @property
    def label(self) -> str:
        return f"{self.cycle_tag} {SERIES_LABEL_SUFFIXES[self.kind]}"

    @property
    def is_derived(self) -> bool:
        return self.kind in (SeriesKind.USAGE_LIMIT, SeriesKind.SPEED_LIMIT)


@dataclass(frozen=True, slots=True)
class CycleGroup:
    """Observed and derived series for a single billing cycle."""

    cycle_tag: str
    usage: LabeledSeries
    usage_limit: LabeledSeries
    rate: LabeledSeries
    speed_limit: LabeledSeries

    def series(self) -> List[LabeledSeries]:
        return [self.usage, self.usage_limit, self.rate, self.speed_limit]


@dataclass(frozen=True, slots=True)
class Dataset:
    """Merged observed + forecast series, keyed by cycle-tag."""

    groups: Dict[str, CycleGroup] = field(default_factory=dict)

    @property
    def cycle_tags(self) -> List[str]:
        return sorted(self.groups)

    def usage_series(self) -> List[LabeledSeries]:
        """Observed usage and expected usage, ordered by cycle."""
        result: List[LabeledSeries] = []
        for tag in self.cycle_tags:
            group = self.groups[tag]
            result.extend([group.usage, group.usage_limit])
        return result

    def speed_series(self) -> List[LabeledSeries]:
        """Observed rate and speed limit, ordered by cycle."""
        result: List[LabeledSeries] = []
        for tag in self.cycle_tags:
            group = self.groups[tag]
            result.extend([group.rate, group.speed_limit])
        return result

    def all_series(self) -> List[LabeledSeries]:
        return [s for tag in self.cycle_tags for s in self.groups[tag].series()]
