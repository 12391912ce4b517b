"""Local development endpoints.

Only ``backend.app.dev.create_dev_app`` mounts this router: ``/api/config``
here returns the literal API key and must never be part of a public
deployment.
"""

# ruff: noqa: BLE001
from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from envbridge.config import DEV_API_KEY_VARIABLE, development_config, mask_api_key
from envbridge.environment import EnvironmentSnapshot

from ...core.config import BackendSettings, get_backend_settings, get_environment
from ...schemas import dev as dev_schema
from ...services import logs as logs_service

LOGGER = logging.getLogger("envbridge.backend.dev")

router = APIRouter(prefix="/api", tags=["development"])


@router.get("/config", summary="Development config including the API key")
async def get_dev_config(
    env: EnvironmentSnapshot = Depends(get_environment),  # noqa: B008
) -> JSONResponse:
    api_key = env.get(DEV_API_KEY_VARIABLE)
    if not api_key:
        LOGGER.error("%s environment variable not found", DEV_API_KEY_VARIABLE)
        return JSONResponse(
            {
                "error": "API key not configured",
                "message": f"Set the {DEV_API_KEY_VARIABLE} environment variable",
            },
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    LOGGER.info("Read %s: %s", DEV_API_KEY_VARIABLE, mask_api_key(api_key))
    return JSONResponse(development_config(api_key).to_payload())


@router.get(
    "/health",
    response_model=dev_schema.HealthResponse,
    summary="Health check",
)
async def health(
    env: EnvironmentSnapshot = Depends(get_environment),  # noqa: B008
) -> dev_schema.HealthResponse:
    return dev_schema.HealthResponse(
        timestamp=iso_timestamp(),
        has_api_key=bool(env.get(DEV_API_KEY_VARIABLE)),
    )


@router.post(
    "/save-logs",
    response_model=dev_schema.SaveLogsResponse,
    response_model_exclude_none=True,
    summary="Persist game logs posted by the front end",
)
async def save_logs(
    payload: dev_schema.SaveLogsRequest,
    settings: BackendSettings = Depends(get_backend_settings),  # noqa: B008
) -> dev_schema.SaveLogsResponse | JSONResponse:
    LOGGER.info(
        "Save-logs request: %d conversation entries, %d system entries",
        len(payload.conversation_log or []),
        len(payload.system_log or []),
    )
    if payload.conversation_log is None and payload.system_log is None:
        return JSONResponse(
            {"success": False, "message": "No log data provided"},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    try:
        saved = await logs_service.save_game_logs(
            settings.logs_dir, payload.conversation_log, payload.system_log
        )
    except Exception as exc:
        LOGGER.exception("Saving logs failed")
        return JSONResponse(
            {"success": False, "message": "Failed to save logs", "error": str(exc)},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    LOGGER.info("Saved %d log file(s)", len(saved))
    return dev_schema.SaveLogsResponse(success=True, message="Logs saved", results=saved)


def iso_timestamp(now: datetime | None = None) -> str:
    moment = now or datetime.now(UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )
