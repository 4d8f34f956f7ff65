"""talkback_core.config.env
=========================

Environment variable mapping and parsing helpers for the core configuration.

Design Notes
------------
- ``ENV_MAP`` is the single source of truth from config field to env var.
- Parsers return ``None`` for unset values so callers can fall back to the
  next configuration layer; malformed values raise ``ValueError``.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

CONFIG_FILE_ENV = "TALKBACK_CONFIG_FILE"

ENV_MAP: Dict[str, str] = {
    "host_sdk_version": "TALKBACK_HOST_SDK_VERSION",
    "cache_empty_enumeration": "TALKBACK_CACHE_EMPTY_ENUMERATION",
    "toggle_control_class": "TALKBACK_TOGGLE_CONTROL_CLASS",
    "checked_resource_key": "TALKBACK_CHECKED_RESOURCE_KEY",
    "not_checked_resource_key": "TALKBACK_NOT_CHECKED_RESOURCE_KEY",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Parse a boolean env value (1/0, true/false, yes/no, on/off)."""
    if value is None or not value.strip():
        return None
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def parse_optional_int(value: Optional[str]) -> Optional[int]:
    """Parse an integer env value; blank or unset yields ``None``."""
    if value is None or not value.strip():
        return None
    return int(value.strip())


_PARSERS = {
    "host_sdk_version": parse_optional_int,
    "cache_empty_enumeration": parse_bool,
}


def env_overrides() -> Dict[str, Any]:
    """Return config fields set through environment variables."""
    out: Dict[str, Any] = {}
    for field, var in ENV_MAP.items():
        raw = os.getenv(var)
        if raw is None:
            continue
        parser = _PARSERS.get(field)
        value = parser(raw) if parser else raw.strip()
        if value is not None and value != "":
            out[field] = value
    return out


__all__ = ["CONFIG_FILE_ENV", "ENV_MAP", "parse_bool", "parse_optional_int", "env_overrides"]
