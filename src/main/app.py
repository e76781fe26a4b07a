"""
Main Application - Main Layer

FastAPI application serving the quota forecast to the dashboard.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.main.config import AppSettings, get_settings
from src.main.container import app_lifespan, init_container
from src.presentation.controllers import forecast_router, system_router
from src.shared import configure_logging, get_logger, update_logging_from_settings

# Bootstrap from LOG_* env vars so settings validation errors are logged too
configure_logging()
update_logging_from_settings(get_settings())

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Record the start time and hold container resources while serving."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("app.startup", title=app.title, version=app.version)

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("app.shutdown")


def create_app(settings: AppSettings | None = None) -> FastAPI:
    settings = settings or get_settings()
    init_container(settings)

    app = FastAPI(
        title=settings.ge.title,
        description=settings.ge.description,
        version=settings.ge.version,
        debug=settings.ge.debug,
        lifespan=lifespan,
    )

    # The dashboard is served from another origin and only reads
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(forecast_router)
    app.include_router(system_router)
    return app


app = create_app()
