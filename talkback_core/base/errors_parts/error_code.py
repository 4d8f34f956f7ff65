"""
Normalized error codes (taxonomy) for the accessibility core.

Defines the `ErrorCode` enumeration used by the capability cache, the event
text aggregator and the package helpers. Values are lowercase snake_case and
are considered a stable public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    HOST_UNSUPPORTED = "host_unsupported"
    ENUMERATION_UNAVAILABLE = "enumeration_unavailable"
    ENUMERATION_FAILED = "enumeration_failed"
    CLASSIFICATION_UNKNOWN = "classification_unknown"
    RESOURCE_UNAVAILABLE = "resource_unavailable"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
