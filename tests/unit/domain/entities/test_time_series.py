from __future__ import annotations

import pytest

from src.domain.entities.errors import SeriesOrderError
from src.domain.entities.time_series import Sample, TimeSeries
from tests.conftest import make_series, utc


def test_series_exposes_labels_and_name(march_usage) -> None:
    assert march_usage.name == "l4_total_bytes"
    assert march_usage.label("since") == "2024-03"
    assert march_usage.label("missing") is None
    assert len(march_usage) == 4


def test_labels_are_read_only(march_usage) -> None:
    with pytest.raises(TypeError):
        march_usage.labels["since"] = "2024-04"  # type: ignore[index]


def test_labels_are_copied_from_input() -> None:
    labels = {"since": "2024-03"}
    series = TimeSeries(labels=labels)
    labels["since"] = "2024-04"
    assert series.label("since") == "2024-03"


def test_rejects_unordered_samples() -> None:
    with pytest.raises(SeriesOrderError):
        make_series([(utc(2024, 3, 2), 1.0), (utc(2024, 3, 1), 2.0)])


def test_rejects_duplicate_timestamps() -> None:
    with pytest.raises(SeriesOrderError):
        make_series([(utc(2024, 3, 1), 1.0), (utc(2024, 3, 1), 2.0)])


def test_with_samples_keeps_labels(march_usage) -> None:
    copy = march_usage.with_samples([Sample(utc(2024, 3, 5), 1.0)])
    assert copy.labels == march_usage.labels
    assert copy.timestamps == (utc(2024, 3, 5),)
    assert len(march_usage) == 4
