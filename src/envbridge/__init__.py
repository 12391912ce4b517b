"""envbridge – serves environment-derived configuration to a browser front end."""

from .config import (
    ApiKeyNotConfiguredError,
    ConfigResponse,
    RequestConfig,
    development_config,
    find_api_key,
    hosted_config,
    require_api_key,
)
from .cors import DEV_SERVER_POLICY, HOSTED_API_POLICY, CorsPolicy
from .debug import DebugConfig, DebugFeatures, resolve_debug_config
from .environment import EnvironmentSnapshot, snapshot_environment
from .logs import GameLogStore, SavedLog

__all__ = [
    "ApiKeyNotConfiguredError",
    "ConfigResponse",
    "CorsPolicy",
    "DEV_SERVER_POLICY",
    "DebugConfig",
    "DebugFeatures",
    "EnvironmentSnapshot",
    "GameLogStore",
    "HOSTED_API_POLICY",
    "RequestConfig",
    "SavedLog",
    "development_config",
    "find_api_key",
    "hosted_config",
    "require_api_key",
    "resolve_debug_config",
    "snapshot_environment",
]
