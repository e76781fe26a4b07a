"""
Server Entry Point - Main Layer

Runs the FastAPI application with uvicorn using the configured host,
port and reload settings.
"""

import uvicorn

from src.main.config import get_settings
from src.shared import configure_logging, get_logger, update_logging_from_settings

logger = get_logger(__name__)


def main() -> None:
    """Start the HTTP server."""

    configure_logging()
    settings = get_settings()
    update_logging_from_settings(settings)

    logger.info(
        "server.starting",
        host=settings.ge.host,
        port=settings.ge.port,
        reload=settings.ge.reload,
        prometheus_url=settings.prometheus.url,
    )

    uvicorn.run(
        "src.main.app:app",
        host=settings.ge.host,
        port=settings.ge.port,
        reload=settings.ge.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
