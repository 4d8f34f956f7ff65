"""Event text aggregation.

Joins an event's text fragments with single spaces. For events coming from a
toggle control the framework has already appended the control's state text
("checked" / "not checked"), which the pipeline announces separately from the
checked attribute. The first fragment equal to either state label is dropped
for those events. Later equal fragments are kept.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..constants import SPACE
from ..dto import AccessibilityEventData
from ..errors import ErrorCode, wrap_exception
from ..interfaces import TypeResolver
from ..labels import StateLabelPair, StateLabels
from ..logging import LogContext, get_logger, log_event

_COMPONENT = "event_text"


def find_state_fragment(fragments: Sequence[Any], labels: StateLabelPair) -> int:
    """Return the index of the first fragment equal to a state label, or -1."""
    for index, fragment in enumerate(fragments):
        if labels.matches(fragment):
            return index
    return -1


def join_fragments(fragments: Sequence[Any], skip_index: int = -1) -> str:
    """Join ``fragments`` with single spaces, leaving out ``skip_index``."""
    return SPACE.join(str(f) for i, f in enumerate(fragments) if i != skip_index)


class EventTextAggregator:
    """Builds the spoken text of an accessibility event.

    Classification failures never fail aggregation: an unknown source type
    simply disables the state-fragment exclusion.
    """

    def __init__(self, type_resolver: TypeResolver, state_labels: StateLabels) -> None:
        self._type_resolver = type_resolver
        self._state_labels = state_labels
        self._logger = get_logger(__name__)

    def aggregate_text(
        self,
        context: Any,
        fragments: Sequence[Any],
        event_class_name: str,
        event_package_name: str,
    ) -> str:
        """Return the fragments joined by spaces, minus a duplicated state label.

        Parameters
        ----------
        context:
            Opaque caller context forwarded to the type resolver.
        fragments:
            Ordered event text fragments; not modified.
        event_class_name / event_package_name:
            Identify the event source for type resolution.
        """
        labels = self._state_labels.ensure_resolved()
        is_toggle = self._is_toggle_source(context, event_class_name, event_package_name)
        skip_index = -1
        if is_toggle and labels is not None:
            skip_index = find_state_fragment(fragments, labels)
        return join_fragments(fragments, skip_index)

    def get_event_text(self, context: Any, event: AccessibilityEventData) -> str:
        """Aggregate the text of ``event``."""
        return self.aggregate_text(context, event.text, event.class_name, event.package_name)

    def _is_toggle_source(self, context: Any, class_name: str, package_name: str) -> bool:
        ctx = LogContext(component=_COMPONENT, class_name=class_name, package_name=package_name)
        try:
            handle = self._type_resolver.resolve_type(context, class_name, package_name)
            if handle is None:
                log_event(
                    self._logger,
                    "event_text.type_unknown",
                    ctx,
                    level=logging.DEBUG,
                    error_code=ErrorCode.CLASSIFICATION_UNKNOWN.value,
                )
                return False
            return bool(self._type_resolver.is_toggle_control_type(handle))
        except Exception as exc:  # classification is best effort
            err = wrap_exception(exc, _COMPONENT)
            log_event(
                self._logger,
                "event_text.classification_failed",
                ctx,
                level=logging.WARNING,
                error_code=err.code.value,
                error=err.message,
            )
            return False


__all__ = ["EventTextAggregator", "find_state_fragment", "join_fragments"]
