"""
Logging Configuration - Shared Layer

Routes stdlib logging through structlog's ProcessorFormatter so that
modules emit dotted event names with key/value context, rendered for
humans in development and as JSON lines in production.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from src.shared.consts import EnumEnvironment

# Per-request chatter from the HTTP client is only useful when debugging
NOISY_LOGGERS = ("httpx", "httpcore")


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer_for(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _env_value(value: Any) -> Any:
    return value.value if hasattr(value, "value") else value


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    (Re)configure root logging.

    Called once with environment defaults at import time of the app module
    and again once settings are loaded. Explicit arguments win over the
    LOG_LEVEL / LOG_FILE_PATH environment variables.

    ``format_string`` is accepted for settings compatibility; rendering is
    owned by structlog.
    """
    log_level = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    log_file = file_path or os.environ.get("LOG_FILE_PATH")
    numeric_level = getattr(logging, log_level, logging.INFO)

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_renderer_for(environment),
        foreign_pre_chain=_shared_processors(),
    )

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    get_logger(__name__).debug(
        "logging.configured",
        level=log_level,
        file_path=log_file,
        environment=environment,
    )


def update_logging_from_settings(settings: Any) -> None:
    """Apply the LOG_* and ENVIRONMENT settings once they are loaded."""
    try:
        configure_logging(
            level=_env_value(settings.logging.level),
            format_string=settings.logging.format,
            file_path=settings.logging.file_path,
            environment=_env_value(settings.environment),
        )
    except (AttributeError, TypeError) as e:
        get_logger(__name__).error("logging.settings_update_failed", error=str(e))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
