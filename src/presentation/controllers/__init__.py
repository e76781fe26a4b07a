"""
Controllers Package - Presentation Layer

FastAPI routers for the forecast and system endpoints. They translate
query parameters into request DTOs and domain errors into HTTP statuses.
"""

from .forecast_controller import router as forecast_router
from .system_controller import router as system_router

__all__ = ["forecast_router", "system_router"]
