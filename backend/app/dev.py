"""Local development server.

Serves the front end's static files and the development variants of the
config endpoints, reading secrets straight from the process environment::

    python -m backend.app.dev
"""

from __future__ import annotations

import asyncio
import logging
import sys
import threading
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from types import TracebackType
from typing import Any

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException
from starlette.types import Scope

from envbridge.config import DEV_API_KEY_VARIABLE, mask_api_key
from envbridge.cors import DEV_SERVER_POLICY, CorsPolicy
from envbridge.environment import EnvironmentSnapshot, snapshot_environment

from .api.routes import dev as dev_routes
from .core.config import BackendSettings, get_backend_settings
from .core.logging import configure_logging
from .core.responses import JsonResponder

LOGGER = logging.getLogger("envbridge.backend.devserver")


class PublicStaticFiles(StaticFiles):
    """``StaticFiles`` that refuses dot-files such as ``.env`` and ``.logs``."""

    def get_path(self, scope: Scope) -> str:
        path = super().get_path(scope)
        if any(part.startswith(".") for part in Path(path).parts if part != "."):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return path


def create_dev_app(settings: BackendSettings | None = None) -> FastAPI:
    settings = settings or get_backend_settings()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        asyncio.get_running_loop().set_exception_handler(_log_unhandled_rejection)
        log_startup(settings, snapshot_environment())
        yield

    application = FastAPI(
        title="envbridge development server",
        version=settings.version,
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    configure_logging(settings.environment)
    _configure_cors(application, DEV_SERVER_POLICY)
    application.include_router(dev_routes.router)
    application.dependency_overrides[get_backend_settings] = lambda: settings
    _configure_static(application, settings)

    return application


def _configure_cors(application: FastAPI, policy: CorsPolicy) -> None:
    headers = policy.response_headers()
    responder = JsonResponder(policy)

    @application.middleware("http")
    async def apply_cors_headers(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.method == "OPTIONS":
            return responder.preflight()
        response = await call_next(request)
        response.headers.update(headers)
        return response


def _configure_static(application: FastAPI, settings: BackendSettings) -> None:
    static_root = Path(settings.static_root)
    entry_document = static_root / settings.entry_document

    @application.get("/", include_in_schema=False)
    async def index() -> Response:
        if not entry_document.is_file():
            return JSONResponse(
                {"detail": f"{settings.entry_document} not found"},
                status_code=status.HTTP_404_NOT_FOUND,
            )
        return FileResponse(entry_document)

    # Mounted last so the API routes above take precedence.
    application.mount(
        "/",
        PublicStaticFiles(directory=static_root, check_dir=False),
        name="static",
    )


def install_exception_logging() -> None:
    """Log uncaught exceptions instead of letting them pass silently.

    Covers the main thread, worker threads and asyncio tasks whose exceptions
    are never retrieved. Nothing is re-raised.
    """

    def _log_uncaught(
        exc_type: type[BaseException],
        exc: BaseException,
        tb: TracebackType | None,
    ) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc, tb)
            return
        LOGGER.error("Uncaught exception", exc_info=(exc_type, exc, tb))

    def _log_thread_exception(args: threading.ExceptHookArgs) -> None:
        if args.exc_value is None:
            return
        LOGGER.error(
            "Uncaught exception in thread %s",
            args.thread.name if args.thread else "<unknown>",
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        )

    sys.excepthook = _log_uncaught
    threading.excepthook = _log_thread_exception


def _log_unhandled_rejection(
    loop: asyncio.AbstractEventLoop, context: dict[str, Any]
) -> None:
    exc = context.get("exception")
    LOGGER.error(
        "Unhandled asyncio error: %s",
        context.get("message", "unknown"),
        exc_info=(type(exc), exc, exc.__traceback__) if exc else None,
    )


def log_startup(settings: BackendSettings, env: EnvironmentSnapshot) -> None:
    base = f"http://{settings.host}:{settings.port}"
    LOGGER.info("Development server listening on %s", base)
    LOGGER.info("Config endpoint: %s/api/config", base)
    LOGGER.info("Health check: %s/api/health", base)

    api_key = env.get(DEV_API_KEY_VARIABLE)
    if api_key:
        LOGGER.info("Detected %s: %s", DEV_API_KEY_VARIABLE, mask_api_key(api_key))
    else:
        LOGGER.warning(
            "%s is not set; /api/config will answer 500 until it is",
            DEV_API_KEY_VARIABLE,
        )


def main() -> None:
    env_file = snapshot_environment().get("ENVBRIDGE_ENV_FILE", ".env")
    load_dotenv(env_file)
    get_backend_settings.cache_clear()
    settings = get_backend_settings()

    application = create_dev_app(settings)
    install_exception_logging()
    uvicorn.run(application, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
