from __future__ import annotations

from datetime import timezone

from src.application.dtos.forecast_dto import (
    CycleWindowDTO,
    ForecastDatasetDTO,
    SeriesDTO,
)
from src.domain.entities.dataset import LabeledSeries, SeriesKind
from src.domain.services.dataset_merger import merge_dataset
from src.domain.services.quota_model import QuotaModel
from src.domain.services.series_validator import filter_by_since
from tests.conftest import utc


def test_series_dto_from_domain(march_usage) -> None:
    dto = SeriesDTO.from_domain(
        LabeledSeries("2024-03", SeriesKind.USAGE_LIMIT, march_usage)
    )

    assert dto.label == "2024-03 Usage Limit"
    assert dto.kind is SeriesKind.USAGE_LIMIT
    assert dto.derived is True
    assert len(dto.points) == 4
    assert dto.points[1].timestamp == utc(2024, 3, 1, 6)
    assert dto.points[1].value == 2.0e9


def test_forecast_dataset_dto_splits_charts(march_usage, march_rate, quota_params):
    model = QuotaModel(quota_params, timezone.utc)
    dataset = merge_dataset(
        filter_by_since([march_usage], tz=timezone.utc),
        filter_by_since([march_rate], tz=timezone.utc),
        model,
    )

    dto = ForecastDatasetDTO.from_domain(
        dataset,
        generated_at=utc(2024, 3, 2),
        start=utc(2024, 2, 1),
        end=utc(2024, 3, 2),
        sampling_interval="6h",
        params=quota_params,
    )

    assert dto.cycle_tags == ["2024-03"]
    assert [s.label for s in dto.usage.series] == ["2024-03 Usage", "2024-03 Usage Limit"]
    assert [s.label for s in dto.speed.series] == [
        "2024-03 Used Speed",
        "2024-03 Speed Limit",
    ]
    assert dto.parameters.peak_rate == quota_params.peak_rate

    payload = dto.model_dump(mode="json")
    assert payload["usage"]["series"][0]["kind"] == "usage"
    assert payload["speed"]["series"][1]["derived"] is True


def test_cycle_window_dto_from_domain(quota_params) -> None:
    model = QuotaModel(quota_params, timezone.utc)
    at = utc(2024, 3, 16)
    window = model.window(at)

    dto = CycleWindowDTO.from_domain(
        at,
        window,
        moved_bytes=model.moved_bytes(window.duration_seconds),
        expected_usage=model.expected_at(window.elapsed_seconds, window.duration_seconds),
        params=quota_params,
    )

    assert dto.start == utc(2024, 3, 1)
    assert dto.end == utc(2024, 4, 1)
    assert dto.duration_seconds == 31 * 86400
    assert dto.elapsed_seconds == 15 * 86400
    assert dto.parameters.cap == quota_params.cap
