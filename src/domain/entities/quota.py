"""
Quota domain entities.

Value objects describing a billing cycle window and the parameters of the
forecast / rate-limit control law.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class CycleWindow:
    """Billing cycle enclosing a given instant.

    ``elapsed_seconds`` is always in ``[0, duration_seconds)``.
    """

    start: datetime
    end: datetime
    duration_seconds: float
    elapsed_seconds: float

    @property
    def remaining_seconds(self) -> float:
        return self.duration_seconds - self.elapsed_seconds


@dataclass(frozen=True, slots=True)
class QuotaParameters:
    """Configuration of the forecast for one run.

    Attributes:
        cap: Monthly byte cap.
        grace_seconds: Horizon over which the speed limit smooths back
            towards the expected-usage curve.
        peak_rate: Hard ceiling on the transfer rate, in bytes per second.
        early_shift_bytes: Extra allowance granted at the start of the cycle
            on top of the grace-derived amount.
    """

    cap: float
    grace_seconds: float
    peak_rate: float
    early_shift_bytes: float = 0.0
