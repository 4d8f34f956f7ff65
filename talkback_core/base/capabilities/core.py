"""Host capability cache.

``CapabilityCache.has_capability(name)`` answers whether the host reports a
named capability. The full capability list is enumerated lazily, once, and
then served from memory. Enumeration failures never escape: they degrade to
"unsupported" for the current call and leave the cache empty so the next call
tries again.

Outcome of a query, in order:

1. Host SDK below the feature-API gate: ``False``; nothing is enumerated or
   cached.
2. Cache not filled: enumerate under the lock.
   - enumerator lacks ``enumerate_capabilities`` or returns ``None``
     (unavailable): ``False``, cache stays empty.
   - enumerator raises, or an entry's ``name`` cannot be read: ``False``,
     cache stays empty (no partial fill).
   - otherwise the names are published in one assignment.
3. Answer from set membership.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, FrozenSet, Iterable, Mapping, Optional

from ..constants import FEATURE_API_MIN_SDK
from ..errors import ErrorCode, wrap_exception
from ..interfaces import CapabilityEnumerator
from ..logging import LogContext, get_logger, log_event

_COMPONENT = "capabilities"


def _feature_name(entry: Any) -> Optional[str]:
    """Read the ``name`` field of one enumerated entry.

    Mapping entries must carry a ``"name"`` key; other entries a ``name``
    attribute. A missing field raises (``KeyError`` / ``AttributeError``) and
    a non-string, non-``None`` value raises ``TypeError``.
    """
    name = entry["name"] if isinstance(entry, Mapping) else getattr(entry, "name")
    if name is not None and not isinstance(name, str):
        raise TypeError(f"capability name must be str, got {type(name).__name__}")
    return name


def _collect_names(entries: Iterable[Any]) -> FrozenSet[str]:
    return frozenset(n for n in map(_feature_name, entries) if n is not None)


class CapabilityCache:
    """Lazily filled, explicitly owned cache of host capability names.

    Thread safety: the check-unfilled/enumerate/fill sequence runs under a
    lock; filled state is read without locking.

    Parameters
    ----------
    enumerator:
        Collaborator reporting the host's capabilities.
    sdk_version:
        Host SDK version, or ``None`` when unknown (gate skipped).
    min_sdk_version:
        First SDK version exposing the enumeration API.
    cache_empty_enumeration:
        Whether a successful enumeration with zero names counts as filled.
        When false, an empty result is re-enumerated on every query.
    """

    def __init__(
        self,
        enumerator: CapabilityEnumerator,
        *,
        sdk_version: Optional[int] = None,
        min_sdk_version: int = FEATURE_API_MIN_SDK,
        cache_empty_enumeration: bool = True,
    ) -> None:
        self._enumerator = enumerator
        self._sdk_version = sdk_version
        self._min_sdk_version = min_sdk_version
        self._cache_empty_enumeration = cache_empty_enumeration
        self._known_features: FrozenSet[str] = frozenset()
        self._filled = False
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)

    @property
    def known_features(self) -> FrozenSet[str]:
        """Snapshot of the cached capability names (empty until filled)."""
        return self._known_features

    @property
    def is_filled(self) -> bool:
        if self._cache_empty_enumeration:
            return self._filled
        return bool(self._known_features)

    def host_supports_enumeration(self) -> bool:
        """Return False when the host predates the enumeration API."""
        return self._sdk_version is None or self._sdk_version >= self._min_sdk_version

    def has_capability(self, capability_name: str) -> bool:
        """Return True if the host reports ``capability_name``.

        Never raises; every failure mode answers ``False``.
        """
        if not self.host_supports_enumeration():
            log_event(
                self._logger,
                "capabilities.host_unsupported",
                LogContext(component=_COMPONENT),
                level=logging.DEBUG,
                error_code=ErrorCode.HOST_UNSUPPORTED.value,
                sdk_version=self._sdk_version,
                min_sdk_version=self._min_sdk_version,
            )
            return False
        if not self.is_filled:
            with self._lock:
                if not self.is_filled and not self._fill():
                    return False
        return capability_name in self._known_features

    has_system_feature = has_capability

    def reset(self) -> None:
        """Drop cached names so the next query enumerates again."""
        with self._lock:
            self._known_features = frozenset()
            self._filled = False

    def _fill(self) -> bool:
        """Enumerate and publish capability names. Caller holds the lock."""
        enumerate_capabilities = getattr(self._enumerator, "enumerate_capabilities", None)
        if not callable(enumerate_capabilities):
            self._log_unavailable("enumerate_capabilities missing")
            return False
        try:
            entries = enumerate_capabilities()
            if entries is None:
                self._log_unavailable("enumerator returned None")
                return False
            names = _collect_names(entries)
        except Exception as exc:  # any enumeration failure degrades to unsupported
            err = wrap_exception(exc, _COMPONENT, retryable=True)
            log_event(
                self._logger,
                "capabilities.enumeration_failed",
                LogContext(component=_COMPONENT),
                level=logging.WARNING,
                error_code=err.code.value,
                error=err.message,
                retryable=err.retryable,
            )
            return False
        self._known_features = names
        self._filled = True
        log_event(
            self._logger,
            "capabilities.filled",
            LogContext(component=_COMPONENT),
            level=logging.DEBUG,
            count=len(names),
        )
        return True

    def _log_unavailable(self, reason: str) -> None:
        log_event(
            self._logger,
            "capabilities.enumeration_unavailable",
            LogContext(component=_COMPONENT),
            level=logging.DEBUG,
            error_code=ErrorCode.ENUMERATION_UNAVAILABLE.value,
            reason=reason,
        )


__all__ = ["CapabilityCache"]
