"""Application-level models shared between use cases."""

from .forecast_defaults import ForecastDefaults
from .system_info import SystemInfo

__all__ = ["ForecastDefaults", "SystemInfo"]
