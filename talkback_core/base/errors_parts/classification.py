"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Collaborators are free to raise whatever their backing platform raises; these
helpers fold the common shapes (missing attribute, missing key, bad value)
into the core taxonomy for the given component.
"""
from __future__ import annotations

from typing import Dict

from .error_code import ErrorCode
from .talkback_error import TalkBackError

# Component -> code used when no more specific rule applies.
_COMPONENT_DEFAULTS: Dict[str, ErrorCode] = {
    "capabilities": ErrorCode.ENUMERATION_FAILED,
    "labels": ErrorCode.RESOURCE_UNAVAILABLE,
    "event_text": ErrorCode.CLASSIFICATION_UNKNOWN,
    "packages": ErrorCode.NOT_FOUND,
}


def classify_exception(exc: Exception, component: str = "") -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. TalkBackError passthrough.
        2. ``LookupError`` (including ``KeyError``) for package lookups.
        3. The component default.
        4. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, TalkBackError):
        return exc.code
    if component == "packages" and isinstance(exc, LookupError):
        return ErrorCode.NOT_FOUND
    return _COMPONENT_DEFAULTS.get(component, ErrorCode.UNKNOWN)


def wrap_exception(exc: Exception, component: str, *, retryable: bool = False) -> TalkBackError:
    """Return ``exc`` as a :class:`TalkBackError` classified for ``component``."""
    if isinstance(exc, TalkBackError):
        return exc
    return TalkBackError(
        code=classify_exception(exc, component),
        message=f"{type(exc).__name__}: {exc}",
        component=component,
        retryable=retryable,
        raw=exc,
    )


__all__ = ["classify_exception", "wrap_exception"]
