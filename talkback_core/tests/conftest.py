"""Pytest configuration for the core test suite.

Fixtures here isolate the process-wide bits the core touches: the shared
``talkback_core`` logger, environment-driven configuration and the memoized
external config file.
"""

from __future__ import annotations

import io
import logging
from typing import Iterator

import pytest

from talkback_core.base.log_support import JsonFormatter
from talkback_core.base.logging import BASE_LOGGER_NAME, LEVEL_ENV_VAR, get_logger
from talkback_core.config import clear_config_cache
from talkback_core.config.env import CONFIG_FILE_ENV, ENV_MAP
from talkback_core.mock import DictStringResources

LABELS = {"value_checked": "checked", "value_not_checked": "not checked"}


@pytest.fixture()
def log_stream(monkeypatch: pytest.MonkeyPatch) -> Iterator[io.StringIO]:
    """Route the shared logger to an in-memory JSON stream at DEBUG level."""

    monkeypatch.setenv(LEVEL_ENV_VAR, "DEBUG")
    get_logger()
    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    saved = list(base_logger.handlers)
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    handler.setLevel(logging.DEBUG)
    base_logger.handlers[:] = [handler]
    yield stream
    base_logger.handlers[:] = saved


@pytest.fixture()
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove core env vars and forget any memoized config file."""

    monkeypatch.delenv(CONFIG_FILE_ENV, raising=False)
    for var in ENV_MAP.values():
        monkeypatch.delenv(var, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture()
def label_resources() -> DictStringResources:
    """String resources holding the default toggle state labels."""

    return DictStringResources(LABELS)
