import json
from datetime import UTC, datetime

from envbridge.logs import GameLogStore, file_timestamp

MOMENT = datetime(2024, 5, 6, 7, 8, 9, 123000, tzinfo=UTC)


def test_file_timestamp_is_filename_safe():
    assert file_timestamp(MOMENT) == "2024-05-06T07-08-09-123Z"


def test_save_game_logs_writes_both_files(tmp_path):
    store = GameLogStore(tmp_path / ".logs")

    results = store.save_game_logs([{"role": "ai", "text": "你好"}], ["boot"], now=MOMENT)

    assert [r.type for r in results] == ["conversation", "system"]
    assert all(r.success for r in results)
    conversation = tmp_path / ".logs" / "conversation_2024-05-06T07-08-09-123Z.json"
    assert json.loads(conversation.read_text(encoding="utf-8")) == [
        {"role": "ai", "text": "你好"}
    ]
    assert (tmp_path / ".logs" / "system_2024-05-06T07-08-09-123Z.json").exists()


def test_empty_logs_are_skipped(tmp_path):
    store = GameLogStore(tmp_path)

    assert store.save_game_logs([], None) == []


def test_write_failure_is_reported_not_raised(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    store = GameLogStore(blocker / "logs")

    (result,) = store.save_game_logs(None, ["entry"], now=MOMENT)

    assert result.success is False
    assert result.error
    assert result.filename is None
    assert result.path is None
