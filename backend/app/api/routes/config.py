# ruff: noqa: BLE001
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from envbridge.config import ApiKeyNotConfiguredError, hosted_config, require_api_key
from envbridge.cors import HOSTED_API_POLICY
from envbridge.environment import EnvironmentSnapshot

from ...core.config import get_environment
from ...core.responses import JsonResponder, internal_error

LOGGER = logging.getLogger("envbridge.backend.config")

router = APIRouter(prefix="/api", tags=["config"])
responder = JsonResponder(HOSTED_API_POLICY)

API_KEY_GUIDANCE = (
    "API key is not configured. Add DEEPSEEK_API_KEY to the deployment's "
    "environment variables."
)


@router.get("/config", summary="Front-end runtime configuration")
async def get_config(
    env: EnvironmentSnapshot = Depends(get_environment),  # noqa: B008
) -> Response:
    try:
        require_api_key(env)
        return responder.ok(hosted_config().to_payload())
    except ApiKeyNotConfiguredError:
        LOGGER.warning("Config requested but no API key is configured")
        return responder.client_error(
            {"error": "API_KEY_NOT_CONFIGURED", "message": API_KEY_GUIDANCE}
        )
    except Exception as exc:
        LOGGER.exception("Config handler failed")
        return responder.server_error(internal_error(exc))


@router.options("/config", include_in_schema=False)
async def config_preflight() -> Response:
    return responder.preflight()
