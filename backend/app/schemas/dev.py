from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from envbridge.logs import SavedLog


class SaveLogsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conversation_log: list[Any] | None = Field(default=None, alias="conversationLog")
    system_log: list[Any] | None = Field(default=None, alias="systemLog")


class SaveLogsResponse(BaseModel):
    success: bool
    message: str
    results: list[SavedLog] = Field(default_factory=list)


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "ok"
    environment: str = "development"
    timestamp: str
    has_api_key: bool = Field(alias="hasApiKey")
