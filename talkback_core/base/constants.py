"""Base shared constants for the accessibility core.

Central location to avoid scattering magic strings and numbers.
"""
from __future__ import annotations

# First host SDK version exposing system feature enumeration.
FEATURE_API_MIN_SDK = 5

# Returned by version-code lookups for unknown packages.
INVALID_VERSION_CODE = -1

# Event text fragment separator.
SPACE = " "

# String resource keys for the toggle state labels.
VALUE_CHECKED_KEY = "value_checked"
VALUE_NOT_CHECKED_KEY = "value_not_checked"

# Base class of the framework's two-state controls.
COMPOUND_BUTTON_CLASS = "android.widget.CompoundButton"

__all__ = [
    "FEATURE_API_MIN_SDK",
    "INVALID_VERSION_CODE",
    "SPACE",
    "VALUE_CHECKED_KEY",
    "VALUE_NOT_CHECKED_KEY",
    "COMPOUND_BUTTON_CLASS",
]
