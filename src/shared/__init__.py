"""
Shared Layer

Cross-cutting helpers used by every layer: environment enums and
structlog-based logging. Must not depend on infrastructure or frameworks.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
