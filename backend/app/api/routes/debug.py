# ruff: noqa: BLE001
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from envbridge.cors import HOSTED_API_POLICY
from envbridge.debug import SAFE_DEFAULT, resolve_debug_config
from envbridge.environment import EnvironmentSnapshot

from ...core.config import get_environment
from ...core.responses import JsonResponder, internal_error

LOGGER = logging.getLogger("envbridge.backend.debug")

router = APIRouter(prefix="/api", tags=["debug"])
responder = JsonResponder(HOSTED_API_POLICY)


@router.get("/debug", summary="Debug feature flags")
async def get_debug_config(
    env: EnvironmentSnapshot = Depends(get_environment),  # noqa: B008
) -> Response:
    try:
        debug_config = resolve_debug_config(env)
    except Exception as exc:
        LOGGER.exception("Debug handler failed")
        return responder.server_error(
            internal_error(exc, debugConfig=SAFE_DEFAULT.to_payload())
        )
    if debug_config.enabled:
        LOGGER.debug("Debug mode enabled via environment")
    return responder.ok(debug_config.to_payload())


@router.options("/debug", include_in_schema=False)
async def debug_preflight() -> Response:
    return responder.preflight()
