import asyncio
import logging
import sys
import threading

import pytest

from backend.app.core.config import BackendSettings
from backend.app.dev import (
    _log_unhandled_rejection,
    install_exception_logging,
    log_startup,
)

LOGGER_NAME = "envbridge.backend.devserver"


@pytest.fixture
def restore_hooks():
    original_excepthook = sys.excepthook
    original_threading_hook = threading.excepthook
    yield
    sys.excepthook = original_excepthook
    threading.excepthook = original_threading_hook


def _error_records(caplog):
    return [
        record
        for record in caplog.records
        if record.name == LOGGER_NAME and record.levelno == logging.ERROR
    ]


def test_log_startup_masks_detected_key(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)

    log_startup(BackendSettings(), {"DEEPSEEK_API_KEY": "sk-abcdefghijklmnop"})

    assert "sk-abcde..." in caplog.text
    assert "sk-abcdefghijklmnop" not in caplog.text
    assert "http://127.0.0.1:3001" in caplog.text


def test_log_startup_warns_without_key(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)

    log_startup(BackendSettings(port=8080), {})

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert warnings
    assert "DEEPSEEK_API_KEY" in warnings[0].getMessage()


def test_uncaught_exception_is_logged(caplog, restore_hooks):
    install_exception_logging()
    try:
        raise ValueError("boom")
    except ValueError as exc:
        sys.excepthook(type(exc), exc, exc.__traceback__)

    (record,) = _error_records(caplog)
    assert record.exc_info[0] is ValueError


def test_thread_exception_is_logged(caplog, restore_hooks):
    install_exception_logging()
    worker = threading.Thread(target=lambda: None, name="worker-1")
    try:
        raise RuntimeError("thread failure")
    except RuntimeError as exc:
        args = threading.ExceptHookArgs(
            (type(exc), exc, exc.__traceback__, worker)
        )
        threading.excepthook(args)

    (record,) = _error_records(caplog)
    assert "worker-1" in record.getMessage()
    assert record.exc_info[1].args == ("thread failure",)


def test_unhandled_asyncio_error_is_logged(caplog):
    loop = asyncio.new_event_loop()
    try:
        _log_unhandled_rejection(
            loop,
            {"message": "Task exception was never retrieved", "exception": KeyError("x")},
        )
        _log_unhandled_rejection(loop, {"message": "callback failed"})
    finally:
        loop.close()

    records = _error_records(caplog)
    assert len(records) == 2
    assert "Task exception was never retrieved" in records[0].getMessage()
    assert records[0].exc_info[0] is KeyError
    assert "callback failed" in records[1].getMessage()
