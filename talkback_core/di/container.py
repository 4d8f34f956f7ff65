"""Minimal dependency injection container for the accessibility core.

Goals:
- Own the lazily filled caches explicitly instead of module globals; the
  pipeline holds one container and passes components around.
- Build components from validated ``CoreParams`` plus the collaborators the
  host integration supplies.
- ``clear()`` drops every memoized component (tests, host changes).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..base.capabilities import CapabilityCache
from ..base.dto import CoreParams
from ..base.errors import ErrorCode, TalkBackError
from ..base.interfaces import (
    CapabilityEnumerator,
    PackageInfoProvider,
    StringResourceProvider,
    TaskInfoProvider,
    TypeResolver,
)
from ..base.labels import StateLabels
from ..base.text import ClassHierarchyTypeResolver, EventTextAggregator
from ..config import load_core_params


class CoreContainer:
    """Holds collaborators and memoizes the components built on them."""

    def __init__(
        self,
        params: Optional[CoreParams] = None,
        *,
        enumerator: Optional[CapabilityEnumerator] = None,
        string_resources: Optional[StringResourceProvider] = None,
        type_resolver: Optional[TypeResolver] = None,
        package_info: Optional[PackageInfoProvider] = None,
        task_info: Optional[TaskInfoProvider] = None,
    ) -> None:
        self.params = params or CoreParams()
        self._enumerator = enumerator
        self._string_resources = string_resources
        self._type_resolver = type_resolver
        self.package_info = package_info
        self.task_info = task_info
        self._singletons: Dict[str, Any] = {}

    @staticmethod
    def _require(value: Any, name: str) -> Any:
        if value is None:
            raise TalkBackError(
                code=ErrorCode.VALIDATION,
                message=f"{name} collaborator not configured",
                component="di",
            )
        return value

    # ---- Components ----
    def capability_cache(self) -> CapabilityCache:
        if "capability_cache" not in self._singletons:
            self._singletons["capability_cache"] = CapabilityCache(
                self._require(self._enumerator, "enumerator"),
                sdk_version=self.params.host_sdk_version,
                min_sdk_version=self.params.feature_api_min_sdk,
                cache_empty_enumeration=self.params.cache_empty_enumeration,
            )
        return self._singletons["capability_cache"]

    def state_labels(self) -> StateLabels:
        if "state_labels" not in self._singletons:
            self._singletons["state_labels"] = StateLabels(
                self._require(self._string_resources, "string_resources"),
                checked_key=self.params.checked_resource_key,
                not_checked_key=self.params.not_checked_resource_key,
            )
        return self._singletons["state_labels"]

    def type_resolver(self) -> TypeResolver:
        """Return the supplied resolver, or one preloaded with the framework toggle widgets."""
        if self._type_resolver is None:
            self._type_resolver = ClassHierarchyTypeResolver.with_framework_classes(
                toggle_base=self.params.toggle_control_class
            )
        return self._type_resolver

    def event_text_aggregator(self) -> EventTextAggregator:
        if "event_text_aggregator" not in self._singletons:
            self._singletons["event_text_aggregator"] = EventTextAggregator(
                self.type_resolver(), self.state_labels()
            )
        return self._singletons["event_text_aggregator"]

    def clear(self) -> None:  # testing convenience
        """Drop memoized components; the next accessor rebuilds them empty."""
        self._singletons.clear()


def build_container(overrides: Optional[Dict[str, Any]] = None, **collaborators: Any) -> CoreContainer:
    """Construct a container from merged configuration and collaborators.

    Args:
        overrides: In-code configuration overrides (highest precedence).
        **collaborators: ``enumerator``, ``string_resources``,
            ``type_resolver``, ``package_info``, ``task_info``.
    """
    return CoreContainer(load_core_params(overrides), **collaborators)


__all__ = ["CoreContainer", "build_container"]
