from __future__ import annotations

from fastapi import FastAPI

from .api.routes import config, debug
from .core.config import get_backend_settings
from .core.logging import configure_logging


def create_app() -> FastAPI:
    """Hosted application: key presence and debug flags, never key values."""
    settings = get_backend_settings()
    application = FastAPI(
        title="envbridge API",
        version=settings.version,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    configure_logging(settings.environment)
    _include_routes(application)

    return application


def _include_routes(application: FastAPI) -> None:
    application.include_router(config.router)
    application.include_router(debug.router)


app = create_app()
