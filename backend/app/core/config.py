import os
from functools import lru_cache

from pydantic import BaseModel, Field

from envbridge.environment import EnvironmentSnapshot, snapshot_environment


class BackendSettings(BaseModel):
    """Backend runtime configuration for the FastAPI applications."""

    environment: str = Field(default="development")
    version: str = Field(default="0.1.0")
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3001)
    static_root: str = Field(default=".")
    entry_document: str = Field(default="index.html")
    logs_dir: str = Field(default=".logs")


@lru_cache(maxsize=1)
def get_backend_settings() -> BackendSettings:
    """Load backend-specific settings from environment variables."""
    return BackendSettings(
        environment=os.getenv("ENVBRIDGE_ENV", "development"),
        version=os.getenv("ENVBRIDGE_API_VERSION", "0.1.0"),
        host=os.getenv("ENVBRIDGE_HOST", "127.0.0.1"),
        port=int(os.getenv("PORT") or "3001"),
        static_root=os.getenv("ENVBRIDGE_STATIC_ROOT", "."),
        entry_document=os.getenv("ENVBRIDGE_ENTRY_DOCUMENT", "index.html"),
        logs_dir=os.getenv("ENVBRIDGE_LOGS_DIR", ".logs"),
    )


def get_environment() -> EnvironmentSnapshot:
    """Per-request read-only view of the process environment.

    Routes depend on this instead of touching ``os.environ`` so tests can
    substitute a fixed mapping through ``app.dependency_overrides``.
    """
    return snapshot_environment()
