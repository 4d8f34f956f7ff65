"""Compute-once pair of toggle state labels.

The framework appends the localized "checked" / "not checked" text to events
from two-state controls; the event text aggregator needs both strings to drop
that fragment. They are loaded once from the core's own string resources and
then shared by every caller.
"""

from __future__ import annotations

import logging
import threading
from typing import NamedTuple, Optional

from ..constants import VALUE_CHECKED_KEY, VALUE_NOT_CHECKED_KEY
from ..errors import wrap_exception
from ..interfaces import StringResourceProvider
from ..logging import LogContext, get_logger, log_event

_COMPONENT = "labels"


class StateLabelPair(NamedTuple):
    checked: str
    not_checked: str

    def matches(self, fragment: object) -> bool:
        return fragment == self.checked or fragment == self.not_checked


class StateLabels:
    """Lazily resolved :class:`StateLabelPair`.

    Resolution happens at most once successfully, keyed only on "not yet
    resolved". A failed lookup is logged and retried on the next call.
    """

    def __init__(
        self,
        resources: StringResourceProvider,
        *,
        checked_key: str = VALUE_CHECKED_KEY,
        not_checked_key: str = VALUE_NOT_CHECKED_KEY,
    ) -> None:
        self._resources = resources
        self._checked_key = checked_key
        self._not_checked_key = not_checked_key
        self._pair: Optional[StateLabelPair] = None
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)

    @property
    def is_resolved(self) -> bool:
        return self._pair is not None

    def ensure_resolved(self) -> Optional[StateLabelPair]:
        """Return the label pair, loading it on first use.

        Returns ``None`` if the resource provider failed; callers treat that as
        "no labels known".
        """
        pair = self._pair
        if pair is not None:
            return pair
        with self._lock:
            if self._pair is None:
                self._pair = self._load()
            return self._pair

    def reset(self) -> None:
        with self._lock:
            self._pair = None

    def _load(self) -> Optional[StateLabelPair]:
        try:
            return StateLabelPair(
                checked=self._resources.get_string(self._checked_key),
                not_checked=self._resources.get_string(self._not_checked_key),
            )
        except Exception as exc:  # labels are optional for aggregation
            err = wrap_exception(exc, _COMPONENT, retryable=True)
            log_event(
                self._logger,
                "labels.resolve_failed",
                LogContext(component=_COMPONENT),
                level=logging.WARNING,
                error_code=err.code.value,
                error=err.message,
                checked_key=self._checked_key,
                not_checked_key=self._not_checked_key,
            )
            return None


__all__ = ["StateLabelPair", "StateLabels"]
