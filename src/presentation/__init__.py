"""Presentation layer: HTTP routers over the application use cases."""

from src.presentation import controllers

__all__ = ["controllers"]
