from __future__ import annotations

from typing import Any

from fastapi import Response
from fastapi.responses import JSONResponse

from envbridge.cors import CorsPolicy


class JsonResponder:
    """Builds JSON and preflight responses carrying a shared CORS policy."""

    def __init__(self, policy: CorsPolicy):
        self.policy = policy

    def ok(self, payload: dict[str, Any], status_code: int = 200) -> JSONResponse:
        headers = self.policy.response_headers()
        headers["Cache-Control"] = "no-cache"
        return JSONResponse(payload, status_code=status_code, headers=headers)

    def client_error(
        self, payload: dict[str, Any], status_code: int = 400
    ) -> JSONResponse:
        return JSONResponse(
            payload, status_code=status_code, headers=self.policy.response_headers()
        )

    def server_error(
        self, payload: dict[str, Any], status_code: int = 500
    ) -> JSONResponse:
        # Origin only: the browser must be able to read the failure body.
        return JSONResponse(
            payload, status_code=status_code, headers=self.policy.origin_headers()
        )

    def preflight(self) -> Response:
        return Response(status_code=200, headers=self.policy.preflight_headers())


def internal_error(exc: Exception, **extra: Any) -> dict[str, Any]:
    return {"error": "INTERNAL_ERROR", "message": str(exc), **extra}
