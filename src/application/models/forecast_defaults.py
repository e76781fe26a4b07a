"""Configuration defaults consumed by the forecast use cases."""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities.quota import QuotaParameters


@dataclass(frozen=True)
class ForecastDefaults:
    """Values used when a forecast request omits them."""

    cap: float
    grace_seconds: float
    peak_rate: float
    early_shift_bytes: float
    sampling_interval: str
    lookback_days: int

    @property
    def quota_parameters(self) -> QuotaParameters:
        return QuotaParameters(
            cap=self.cap,
            grace_seconds=self.grace_seconds,
            peak_rate=self.peak_rate,
            early_shift_bytes=self.early_shift_bytes,
        )
