"""Built-in configuration defaults for the accessibility core."""
from __future__ import annotations

from typing import Any, Dict

from ..base.constants import (
    COMPOUND_BUTTON_CLASS,
    FEATURE_API_MIN_SDK,
    VALUE_CHECKED_KEY,
    VALUE_NOT_CHECKED_KEY,
)

DEFAULT_HOST_SDK_VERSION = None
DEFAULT_CACHE_EMPTY_ENUMERATION = True

DEFAULTS: Dict[str, Any] = {
    "host_sdk_version": DEFAULT_HOST_SDK_VERSION,
    "feature_api_min_sdk": FEATURE_API_MIN_SDK,
    "cache_empty_enumeration": DEFAULT_CACHE_EMPTY_ENUMERATION,
    "toggle_control_class": COMPOUND_BUTTON_CLASS,
    "checked_resource_key": VALUE_CHECKED_KEY,
    "not_checked_resource_key": VALUE_NOT_CHECKED_KEY,
}

__all__ = ["DEFAULTS", "DEFAULT_HOST_SDK_VERSION", "DEFAULT_CACHE_EMPTY_ENUMERATION"]
