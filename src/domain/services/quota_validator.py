"""Domain service helpers for validating forecast configuration."""

import math
import re
from datetime import datetime
from typing import List

from src.domain.entities.errors import ForecastConfigurationError
from src.domain.entities.quota import QuotaParameters

# Shortest possible billing cycle (February, non-leap year)
MIN_CYCLE_SECONDS = 28 * 24 * 3600

_DURATION_PATTERN = re.compile(r"^(?:\d+(?:ms|s|m|h|d|w|y))+$")


def validate_quota_parameters(params: QuotaParameters) -> None:
    """Validate quota parameters before running the control law.

    Raises:
        ForecastConfigurationError: If one or more validation rules fail.
    """

    errors: List[str] = []

    for name in ("cap", "grace_seconds", "peak_rate", "early_shift_bytes"):
        if not math.isfinite(getattr(params, name)):
            errors.append(f"{name} must be a finite number.")

    if params.cap <= 0:
        errors.append("Cap must be greater than 0.")
    if params.peak_rate <= 0:
        errors.append("Peak rate must be greater than 0.")
    if params.grace_seconds <= 0:
        errors.append("Grace window must be greater than 0 seconds.")
    elif params.grace_seconds > MIN_CYCLE_SECONDS:
        errors.append(
            "Grace window cannot be longer than the shortest billing cycle "
            f"({MIN_CYCLE_SECONDS} seconds)."
        )
    if params.early_shift_bytes < 0:
        errors.append("Early shift must not be negative.")

    if errors:
        raise ForecastConfigurationError(
            "Quota parameters are invalid.", details={"errors": errors}
        )


def validate_sampling_interval(interval: str) -> str:
    """Check that ``interval`` is a duration string such as ``6h`` or ``1h30m``."""
    value = (interval or "").strip()
    if not _DURATION_PATTERN.match(value):
        raise ForecastConfigurationError(
            f"Invalid sampling interval {interval!r}",
            details={"errors": ["Sampling interval must look like '6h' or '1h30m'."]},
        )
    return value


def validate_date_range(start: datetime, end: datetime) -> None:
    if end <= start:
        raise ForecastConfigurationError(
            "Date range end must be after its start.",
            details={"start": start.isoformat(), "end": end.isoformat()},
        )
