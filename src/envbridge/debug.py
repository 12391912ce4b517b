from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .environment import EnvironmentSnapshot, is_true

# Any of these set to "true" turns on global debug mode. DEBUG_MODE and
# ENABLE_DEBUG mean the same thing; both stay for older deployments.
DEBUG_FLAG_VARIABLES: tuple[str, ...] = ("DEBUG", "DEBUG_MODE", "ENABLE_DEBUG")

FEATURE_VARIABLES: dict[str, str] = {
    "show_skip_button": "DEBUG_SHOW_SKIP",
    "show_end_game_button": "DEBUG_SHOW_END",
    "show_console_logs": "DEBUG_CONSOLE",
    "auto_save_logs": "DEBUG_AUTO_SAVE",
}

DIAGNOSTIC_VARIABLES: tuple[str, ...] = DEBUG_FLAG_VARIABLES + tuple(
    FEATURE_VARIABLES.values()
)


class DebugFeatures(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    show_skip_button: bool = Field(default=False, alias="showSkipButton")
    show_end_game_button: bool = Field(default=False, alias="showEndGameButton")
    show_console_logs: bool = Field(default=False, alias="showConsoleLogs")
    auto_save_logs: bool = Field(default=False, alias="autoSaveLogs")


class DebugConfig(BaseModel):
    """Debug switches for the front end, derived from environment flags."""

    model_config = ConfigDict(populate_by_name=True)

    enabled: bool
    source: Literal["environment", "error"] = "environment"
    features: DebugFeatures | None = None
    environment_variables: dict[str, str] | None = Field(
        default=None, alias="environmentVariables"
    )

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)


# Returned in place of a computed config when resolution fails. Callers treat
# "disabled" as always safe.
SAFE_DEFAULT = DebugConfig(enabled=False, source="error")


def debug_enabled(env: EnvironmentSnapshot) -> bool:
    return any(is_true(env, name) for name in DEBUG_FLAG_VARIABLES)


def resolve_debug_config(env: EnvironmentSnapshot) -> DebugConfig:
    """Compute the debug config for ``env``.

    Each feature is on when its own variable is ``"true"`` or when global
    debug mode is on. The raw variables are echoed back only in debug mode;
    unset ones are left out.
    """
    enabled = debug_enabled(env)
    features = DebugFeatures(
        **{
            field: is_true(env, variable) or enabled
            for field, variable in FEATURE_VARIABLES.items()
        }
    )

    environment_variables = None
    if enabled:
        environment_variables = {
            name: env[name] for name in DIAGNOSTIC_VARIABLES if name in env
        }

    return DebugConfig(
        enabled=enabled,
        source="environment",
        features=features,
        environment_variables=environment_variables,
    )
