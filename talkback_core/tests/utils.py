"""Shared testing utilities for the core test suite.

Exports:
    - assert_true(condition: bool, message: str) -> None
    - read_events(stream) -> list of structured log payloads
"""
from __future__ import annotations

import io
import json
from typing import Any, Dict, List


def assert_true(condition: bool, message: str) -> None:
    """Raise AssertionError with the provided message if condition is False."""
    if not condition:
        raise AssertionError(message)


def read_events(stream: io.StringIO) -> List[Dict[str, Any]]:
    """Parse every JSON line written to ``stream`` that carries an ``event``."""
    events = []
    for line in stream.getvalue().splitlines():
        if not line.strip():
            continue
        data = json.loads(line)
        if "event" in data:
            events.append(data)
    return events
