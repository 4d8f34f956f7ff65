"""Unified core error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``talkback_core.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.talkback_error import TalkBackError
from .errors_parts.classification import classify_exception, wrap_exception

__all__ = ["ErrorCode", "TalkBackError", "classify_exception", "wrap_exception"]
