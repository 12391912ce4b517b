from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Literal

LOGGER = logging.getLogger("envbridge.logs")

LogKind = Literal["conversation", "system"]


@dataclass
class SavedLog:
    type: LogKind
    success: bool
    filename: str | None = None
    path: str | None = None
    error: str | None = None


def file_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp safe for use in file names."""
    moment = now or datetime.now(UTC)
    iso = moment.astimezone(UTC).isoformat(timespec="milliseconds")
    iso = iso.replace("+00:00", "Z")
    return iso.replace(":", "-").replace(".", "-")


class GameLogStore:
    """Writes front-end game logs as JSON files under ``logs_dir``."""

    def __init__(self, logs_dir: str | Path):
        self.logs_dir = Path(logs_dir)

    def ensure_directory(self) -> Path:
        if not self.logs_dir.exists():
            self.logs_dir.mkdir(parents=True, exist_ok=True)
            LOGGER.info("Created logs directory %s", self.logs_dir)
        return self.logs_dir

    def save(self, kind: LogKind, entries: Any, now: datetime | None = None) -> SavedLog:
        filename = f"{kind}_{file_timestamp(now)}.json"
        try:
            path = self.ensure_directory() / filename
            path.write_text(
                json.dumps(entries, indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except (OSError, TypeError, ValueError) as exc:
            LOGGER.error("Failed to save %s log: %s", kind, exc)
            return SavedLog(type=kind, success=False, error=str(exc))

        LOGGER.info("Saved %s log %s", kind, filename)
        return SavedLog(type=kind, success=True, filename=filename, path=str(path))

    def save_game_logs(
        self,
        conversation_log: list[Any] | None,
        system_log: list[Any] | None,
        now: datetime | None = None,
    ) -> list[SavedLog]:
        """Save whichever of the two logs has entries.

        Returns:
            One result per written (or failed) file, conversation first.
        """
        results: list[SavedLog] = []
        if conversation_log:
            results.append(self.save("conversation", conversation_log, now))
        if system_log:
            results.append(self.save("system", system_log, now))
        return results
