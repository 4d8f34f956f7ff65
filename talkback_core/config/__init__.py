"""Unified configuration layer for the accessibility core.

Sources are merged in a predictable order (later wins):

1. Built-in defaults (``config/defaults.py``)
2. Optional external file named by ``TALKBACK_CONFIG_FILE`` (JSON, or YAML)
3. Environment variables (see ``config/env.py``)
4. In-code overrides passed to the helper

External file example::

    host_sdk_version: 8
    cache_empty_enumeration: false
    checked_resource_key: value_checked

Public API
----------
* get_core_config(overrides: dict | None = None) -> dict
* load_core_params(overrides: dict | None = None) -> CoreParams
* clear_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from ..base.dto import CoreParams
from ..base.errors import ErrorCode, TalkBackError
from .defaults import DEFAULTS
from .env import CONFIG_FILE_ENV, env_overrides

_FILE_CACHE: Optional[Dict[str, Any]] = None


def _load_external_config() -> Dict[str, Any]:
    """Load and memoize the external config file, ``{}`` when absent."""
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise TalkBackError(
                code=ErrorCode.VALIDATION,
                message=f"unreadable config file {path}: {exc}",
                component="config",
                raw=exc,
            ) from exc
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def clear_config_cache() -> None:
    """Forget the memoized external file (tests, config reloads)."""
    global _FILE_CACHE
    _FILE_CACHE = None


def get_core_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged configuration mapping.

    Merge order (later wins): defaults -> external file -> env vars -> overrides.
    Malformed env values raise ``TalkBackError`` with ``ErrorCode.VALIDATION``.
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config()
    try:
        cfg |= env_overrides()
    except ValueError as exc:
        raise TalkBackError(
            code=ErrorCode.VALIDATION, message=str(exc), component="config", raw=exc
        ) from exc
    if overrides:
        cfg |= overrides
    return cfg


def load_core_params(overrides: Optional[Dict[str, Any]] = None) -> CoreParams:
    """Validate the merged configuration into :class:`CoreParams`."""
    cfg = get_core_config(overrides)
    known = set(CoreParams.model_fields)
    extra = {k: v for k, v in cfg.items() if k not in known}
    data = {k: v for k, v in cfg.items() if k in known}
    if extra:
        data["extra"] = {**extra, **(data.get("extra") or {})}
    try:
        return CoreParams.model_validate(data)
    except ValidationError as exc:
        raise TalkBackError(
            code=ErrorCode.VALIDATION, message=str(exc), component="config", raw=exc
        ) from exc


__all__ = ["get_core_config", "load_core_params", "clear_config_cache"]
