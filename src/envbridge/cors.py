from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field


class CorsPolicy(BaseModel):
    """Cross-origin headers shared by every endpoint of an application.

    ``methods`` is advertised on substantive responses, ``preflight_methods``
    on OPTIONS answers. ``max_age`` is the preflight cache duration in
    seconds.
    """

    model_config = ConfigDict(frozen=True)

    allow_origin: str = Field(default="*")
    methods: tuple[str, ...] = Field(default=("GET",))
    preflight_methods: tuple[str, ...] = Field(default=("GET", "OPTIONS"))
    allow_headers: tuple[str, ...] = Field(default=("Content-Type",))
    max_age: int | None = Field(default=86400)

    def origin_headers(self) -> dict[str, str]:
        return {"Access-Control-Allow-Origin": self.allow_origin}

    def response_headers(self) -> dict[str, str]:
        headers = self.origin_headers()
        if self.methods:
            headers["Access-Control-Allow-Methods"] = _join(self.methods)
        if self.allow_headers:
            headers["Access-Control-Allow-Headers"] = _join(self.allow_headers)
        return headers

    def preflight_headers(self) -> dict[str, str]:
        headers = self.origin_headers()
        if self.preflight_methods:
            headers["Access-Control-Allow-Methods"] = _join(self.preflight_methods)
        if self.allow_headers:
            headers["Access-Control-Allow-Headers"] = _join(self.allow_headers)
        if self.max_age is not None:
            headers["Access-Control-Max-Age"] = str(self.max_age)
        return headers


def _join(values: Sequence[str]) -> str:
    return ", ".join(values)


HOSTED_API_POLICY = CorsPolicy()

# Local development: any origin, the usual browser request headers.
DEV_SERVER_POLICY = CorsPolicy(
    methods=(),
    preflight_methods=("GET", "POST", "OPTIONS"),
    allow_headers=("Origin", "X-Requested-With", "Content-Type", "Accept"),
    max_age=None,
)
