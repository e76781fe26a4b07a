"""
Application Layer Package

Use cases that drive the forecast pipeline and the DTOs they hand to the
presentation layer.
"""

from src.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
