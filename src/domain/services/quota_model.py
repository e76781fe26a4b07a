"""Forecast and rate-limit control law for a monthly byte cap.

The expected-usage curve is a straight line over the cycle that starts at
``moved_bytes`` and ends at the cap. ``moved_bytes`` front-loads enough
allowance that, together with the grace window, following the curve never
requires more than the peak rate right after a cycle boundary.

The speed limit takes the larger of two bounds and clamps it to the peak
rate:

* the average rate that lands back on the curve ``grace_seconds`` from now;
* the straight run-rate that consumes the rest of the cap by the cycle end.

The first bound dominates mid-cycle, the second near the end of the cycle.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional

from src.domain.entities.quota import CycleWindow, QuotaParameters
from src.domain.services.calendar_cycle import window_for


class QuotaModel:
    """Evaluate the control law for one set of quota parameters.

    Parameters are not validated here; callers are expected to reject
    non-finite values and grace windows outside ``(0, cycle duration]``.
    """

    def __init__(self, params: QuotaParameters, tz: Optional[tzinfo] = None) -> None:
        self.params = params
        self.tz = tz

    def window(self, instant: datetime) -> CycleWindow:
        return window_for(instant, self.tz)

    def moved_bytes(self, duration_seconds: float) -> float:
        """Allowance granted at ``t=0`` of a cycle lasting ``duration_seconds``."""
        p = self.params
        return (
            p.peak_rate * p.grace_seconds
            - p.cap * p.grace_seconds / duration_seconds
            + p.early_shift_bytes
        )

    def expected_at(self, elapsed_seconds: float, duration_seconds: float) -> float:
        moved = self.moved_bytes(duration_seconds)
        return elapsed_seconds / duration_seconds * (self.params.cap - moved) + moved

    def expected_usage(self, instant: datetime) -> float:
        """Bytes the user is allowed to have consumed by ``instant``."""
        w = self.window(instant)
        return self.expected_at(w.elapsed_seconds, w.duration_seconds)

    def speed_limit(self, instant: datetime, usage_so_far: float) -> float:
        """Maximum transfer rate (bytes/s) at ``instant`` given current usage.

        ``instant`` must lie strictly before the end of its cycle, which
        ``window_for`` guarantees.
        """
        p = self.params
        w = self.window(instant)
        t, duration = w.elapsed_seconds, w.duration_seconds

        target = self.expected_at(t + p.grace_seconds, duration)
        bound_a = (target - usage_so_far) / p.grace_seconds
        bound_b = (p.cap - usage_so_far) / (duration - t)

        # Usage beyond the cap makes both bounds negative; no rate is allowed
        return max(0.0, min(max(bound_a, bound_b), p.peak_rate))
