"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `talkback_core.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .talkback_error import TalkBackError
from .classification import classify_exception, wrap_exception

__all__ = ["ErrorCode", "TalkBackError", "classify_exception", "wrap_exception"]
