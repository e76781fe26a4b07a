"""
Domain Layer Package

This package contains the quota forecast rules: billing cycle arithmetic,
the expected-usage / speed-limit control law and series validation. It has
no dependencies on external frameworks or infrastructure concerns.
"""

# Re-export submodules
from src.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "services", "ports"]
