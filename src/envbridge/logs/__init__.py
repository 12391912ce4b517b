"""On-disk storage for logs posted by the front end."""

from .store import GameLogStore, SavedLog, file_timestamp

__all__ = ["GameLogStore", "SavedLog", "file_timestamp"]
