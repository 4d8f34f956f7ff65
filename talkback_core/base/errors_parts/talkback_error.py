"""
Structured core error exception type.

Wraps collaborator exceptions with a normalized `ErrorCode` so degraded paths
can be logged consistently.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class TalkBackError(Exception):
    """Represents a structured core error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        component: Component where the error originated (e.g. ``"capabilities"``).
        retryable: Whether the next call is expected to retry the operation.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    component: str
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining component, code, and message."""
        return f"{self.component} {self.code.value}: {self.message}"


__all__ = ["TalkBackError"]
