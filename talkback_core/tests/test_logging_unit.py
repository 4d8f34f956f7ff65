"""Unit coverage for structured logging utilities."""

from __future__ import annotations

import io
import json
import logging

from talkback_core.base.log_support import JsonFormatter
from talkback_core.base.logging import (
    BASE_LOGGER_NAME,
    LogContext,
    configure_logger,
    get_logger,
    log_event,
)


def test_get_logger_env_overrides_level(monkeypatch, capsys) -> None:
    monkeypatch.setenv("TALKBACK_LOG_LEVEL", "ERROR")
    logger = get_logger(name="talkback_core.test", json_mode=True, level=logging.DEBUG)
    logger.info("hello")
    assert capsys.readouterr().err == ""  # nosec B101
    logger.error("fail")
    data = json.loads(capsys.readouterr().err.strip())
    assert data["level"] == "ERROR"  # nosec B101
    assert data["msg"] == "fail"  # nosec B101


def test_foreign_names_are_nested_under_base() -> None:
    logger = get_logger(name="pipeline.adapter")
    assert logger.name == f"{BASE_LOGGER_NAME}.pipeline.adapter"  # nosec B101


def test_log_event_hoists_payload(monkeypatch, capsys) -> None:
    monkeypatch.setenv("TALKBACK_LOG_LEVEL", "DEBUG")
    logger = get_logger(name="talkback_core.test.events")
    ctx = LogContext(component="capabilities", extra={"host": "emulator", "skip": None})
    log_event(logger, "capabilities.filled", ctx, level=logging.DEBUG, count=3, missing=None)
    data = json.loads(capsys.readouterr().err.strip())
    assert data["event"] == "capabilities.filled"  # nosec B101
    assert data["component"] == "capabilities"  # nosec B101
    assert data["host"] == "emulator"  # nosec B101
    assert data["count"] == 3  # nosec B101
    assert "missing" not in data and "skip" not in data  # nosec B101
    assert "msg" not in data  # nosec B101


def test_log_event_respects_level(monkeypatch, capsys) -> None:
    monkeypatch.setenv("TALKBACK_LOG_LEVEL", "INFO")
    logger = get_logger(name="talkback_core.test.quiet")
    log_event(logger, "quiet", level=logging.DEBUG)
    assert capsys.readouterr().err == ""  # nosec B101


def test_json_formatter_plain_message() -> None:
    record = logging.LogRecord(
        name="talkback_core.x",
        level=logging.WARNING,
        pathname=__file__,
        lineno=0,
        msg="plain %s",
        args=("text",),
        exc_info=None,
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "plain text"  # nosec B101
    assert payload["logger"] == "talkback_core.x"  # nosec B101


def test_child_logger_uses_parent_handler_without_duplicates(monkeypatch) -> None:
    monkeypatch.delenv("TALKBACK_LOG_LEVEL", raising=False)
    logger = get_logger(name="talkback_core.test.child", json_mode=False)
    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    saved = list(base_logger.handlers)
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    base_logger.handlers[:] = [handler]
    try:
        logger.info("alpha")
        configure_logger(level="WARNING")
        logger.info("hidden")
        logger.warning("visible")
    finally:
        base_logger.handlers[:] = saved
        configure_logger(level=logging.INFO)
    lines = [ln for ln in stream.getvalue().splitlines() if ln]
    assert lines == ["alpha", "visible"]  # nosec B101


def test_configure_logger_file_handler(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("TALKBACK_LOG_LEVEL", raising=False)
    path = tmp_path / "logs" / "core.log"
    logger = configure_logger(file_path=str(path))
    try:
        configure_logger(file_path=str(path))
        managed = [h for h in logger.handlers if getattr(h, "_talkback_file_handler", False)]
        assert len(managed) == 1  # nosec B101
        log_event(get_logger("talkback_core.test.file"), "file.event", value=1)
        for h in managed:
            h.flush()
        data = json.loads(path.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert data["event"] == "file.event"  # nosec B101
    finally:
        configure_logger(file_path=None)
    assert not [h for h in logger.handlers if getattr(h, "_talkback_file_handler", False)]  # nosec B101
