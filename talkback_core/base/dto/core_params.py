"""Typed configuration object for the accessibility core.

Purpose
-------
Carry the validated output of ``talkback_core.config.get_core_config`` into
the container so components receive typed values instead of a raw mapping.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and coercion of env strings.

Failure modes
-------------
Pydantic raises ``ValidationError`` for bad values; ``load_core_params``
converts that into a ``TalkBackError`` with ``ErrorCode.VALIDATION``.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ..constants import (
    COMPOUND_BUTTON_CLASS,
    FEATURE_API_MIN_SDK,
    VALUE_CHECKED_KEY,
    VALUE_NOT_CHECKED_KEY,
)


class CoreParams(BaseModel):
    """Core configuration values.

    Attributes
    ----------
    host_sdk_version:
        SDK version of the running host. ``None`` means unknown, which skips
        the feature-API version gate.
    feature_api_min_sdk:
        First SDK version with feature enumeration.
    cache_empty_enumeration:
        When true, a successful enumeration that returns no names is cached
        like any other; when false the cache re-enumerates while empty.
    toggle_control_class:
        Class name whose subclasses count as toggle controls.
    checked_resource_key / not_checked_resource_key:
        String resource keys of the state labels.
    extra:
        Free-form bag for integration-specific values.
    """

    host_sdk_version: Optional[int] = None
    feature_api_min_sdk: int = Field(default=FEATURE_API_MIN_SDK, ge=0)
    cache_empty_enumeration: bool = True
    toggle_control_class: str = COMPOUND_BUTTON_CLASS
    checked_resource_key: str = VALUE_CHECKED_KEY
    not_checked_resource_key: str = VALUE_NOT_CHECKED_KEY
    extra: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["CoreParams"]
