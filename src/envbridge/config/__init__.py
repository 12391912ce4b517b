from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..environment import EnvironmentSnapshot

API_KEY_CANDIDATES: tuple[str, ...] = ("DEEPSEEK_API_KEY", "API_KEY", "AI_API_KEY")
DEV_API_KEY_VARIABLE = "DEEPSEEK_API_KEY"
API_KEY_PLACEHOLDER = "YOUR_API_KEY_HERE"

DEFAULT_MODEL = "deepseek-chat"
PROXY_ENDPOINT = "/api/chat"
UPSTREAM_BASE_URL = "https://api.deepseek.com/v1/chat/completions"


class ApiKeyNotConfiguredError(ValueError):
    """Raised when none of the candidate variables holds a usable API key."""

    def __init__(self, candidates: Sequence[str]):
        self.candidates = tuple(candidates)
        super().__init__(
            "No API key configured; set one of: " + ", ".join(self.candidates)
        )


class RequestConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    temperature: float = Field(default=0.0)
    max_tokens: int = Field(default=1000, alias="maxTokens")
    # Milliseconds. Advisory only, nothing here enforces it.
    timeout: int = Field(default=30000)


class ConfigResponse(BaseModel):
    """Non-secret model/routing metadata handed to the front end."""

    model_config = ConfigDict(populate_by_name=True)

    has_api_key: bool = Field(alias="hasApiKey")
    environment: Literal["cloudflare-pages", "development"]
    use_proxy: bool = Field(alias="useProxy")
    # Hosted only; the dev server talks to the upstream directly.
    proxy_endpoint: str | None = Field(default=None, alias="proxyEndpoint")
    model: str = Field(default=DEFAULT_MODEL)
    request_config: RequestConfig = Field(
        default_factory=RequestConfig, alias="requestConfig"
    )
    # Local development only.
    api_key: str | None = Field(default=None, alias="apiKey")
    base_url: str | None = Field(default=None, alias="baseUrl")

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)


def find_api_key(
    env: EnvironmentSnapshot,
    candidates: Sequence[str] = API_KEY_CANDIDATES,
) -> str | None:
    """Return the first non-empty candidate value, or ``None``.

    The placeholder value shipped in sample configs is treated as unset.

    Args:
        env: Environment snapshot to read from.
        candidates: Variable names in priority order.

    Returns:
        The API key, or ``None`` when nothing usable is configured.
    """
    for name in candidates:
        value = env.get(name)
        if value:
            return None if value == API_KEY_PLACEHOLDER else value
    return None


def require_api_key(
    env: EnvironmentSnapshot,
    candidates: Sequence[str] = API_KEY_CANDIDATES,
) -> str:
    api_key = find_api_key(env, candidates)
    if api_key is None:
        raise ApiKeyNotConfiguredError(candidates)
    return api_key


def hosted_config() -> ConfigResponse:
    """Config for the hosted deployment; confirms key presence only."""
    return ConfigResponse(
        has_api_key=True,
        environment="cloudflare-pages",
        use_proxy=True,
        proxy_endpoint=PROXY_ENDPOINT,
    )


def development_config(api_key: str) -> ConfigResponse:
    return ConfigResponse(
        has_api_key=True,
        environment="development",
        use_proxy=False,
        api_key=api_key,
        base_url=UPSTREAM_BASE_URL,
    )


def mask_api_key(api_key: str, visible: int = 8) -> str:
    return f"{api_key[:visible]}..."
