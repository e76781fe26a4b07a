"""Derivation and merge stages turning validated series into a Dataset."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from src.domain.entities.dataset import CycleGroup, Dataset, LabeledSeries, SeriesKind
from src.domain.entities.errors import DuplicateCycleTag
from src.domain.entities.time_series import Sample, TimeSeries
from src.domain.services.quota_model import QuotaModel
from src.domain.services.series_validator import DEFAULT_CYCLE_LABEL, cycle_tag_of


def index_by_cycle(
    series: Iterable[TimeSeries], label: str = DEFAULT_CYCLE_LABEL
) -> Dict[str, TimeSeries]:
    """Key series by their cycle-tag, rejecting duplicate tags."""
    indexed: Dict[str, TimeSeries] = {}
    for item in series:
        tag = cycle_tag_of(item, label)
        if tag in indexed:
            raise DuplicateCycleTag(
                tag,
                details={
                    "first": dict(indexed[tag].labels),
                    "second": dict(item.labels),
                },
            )
        indexed[tag] = item
    return indexed


def derive_expected_usage(usage: TimeSeries, model: QuotaModel) -> TimeSeries:
    """Expected usage evaluated at every timestamp of ``usage``."""
    return usage.with_samples(
        Sample(s.timestamp, model.expected_usage(s.timestamp)) for s in usage
    )


def derive_speed_limit(
    usage: TimeSeries, rate: Optional[TimeSeries], model: QuotaModel
) -> TimeSeries:
    """Speed limit computed from usage values, aligned to the rate series.

    When ``rate`` has samples, only usage timestamps present in it are
    kept; otherwise every usage timestamp is used.
    """
    template = rate if rate is not None else usage
    samples = (
        Sample(s.timestamp, model.speed_limit(s.timestamp, s.value)) for s in usage
    )
    if rate is not None and len(rate):
        allowed = set(rate.timestamps)
        samples = (s for s in samples if s.timestamp in allowed)
    return template.with_samples(samples)


def merge_dataset(
    usage_series: Iterable[TimeSeries],
    rate_series: Iterable[TimeSeries],
    model: QuotaModel,
    label: str = DEFAULT_CYCLE_LABEL,
) -> Dataset:
    """Combine observed and derived series into groups keyed by cycle-tag."""
    usage_by_tag = index_by_cycle(usage_series, label)
    rate_by_tag = index_by_cycle(rate_series, label)

    groups: Dict[str, CycleGroup] = {}
    for tag in sorted(set(usage_by_tag) | set(rate_by_tag)):
        rate = rate_by_tag.get(tag)
        usage = usage_by_tag.get(tag)
        if usage is None:
            # Rate without usage: nothing to derive from
            usage = TimeSeries(labels={label: tag})

        observed_rate = rate if rate is not None else TimeSeries(labels={label: tag})
        groups[tag] = CycleGroup(
            cycle_tag=tag,
            usage=LabeledSeries(tag, SeriesKind.USAGE, usage),
            usage_limit=LabeledSeries(
                tag, SeriesKind.USAGE_LIMIT, derive_expected_usage(usage, model)
            ),
            rate=LabeledSeries(tag, SeriesKind.RATE, observed_rate),
            speed_limit=LabeledSeries(
                tag, SeriesKind.SPEED_LIMIT, derive_speed_limit(usage, rate, model)
            ),
        )

    return Dataset(groups=groups)
