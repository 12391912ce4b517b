from __future__ import annotations

from pathlib import Path
from typing import Any

from starlette.concurrency import run_in_threadpool

from envbridge.logs import GameLogStore, SavedLog


async def save_game_logs(
    logs_dir: str | Path,
    conversation_log: list[Any] | None,
    system_log: list[Any] | None,
) -> list[SavedLog]:
    def _save() -> list[SavedLog]:
        store = GameLogStore(logs_dir)
        return store.save_game_logs(conversation_log, system_log)

    return await run_in_threadpool(_save)
