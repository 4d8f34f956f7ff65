"""Deterministic in-memory collaborators for tests and offline wiring.

Purpose
-------
Implement the collaborator Protocols from ``talkback_core.base.interfaces``
without a host platform, so the cache, the aggregator and the helpers can be
exercised end to end. Each double counts its calls for assertions.

External dependencies
---------------------
Standard library plus the core DTOs.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ..base.dto import FeatureInfo, PackageInfo, RunningTaskInfo


class StaticCapabilityEnumerator:
    """Reports a fixed capability list.

    Parameters
    ----------
    names:
        Capability names to report. ``None`` entries become unnamed features.
    unavailable:
        When true, ``enumerate_capabilities`` returns ``None``.
    error:
        Exception raised by ``enumerate_capabilities`` instead of answering.
    """

    def __init__(
        self,
        names: Iterable[Optional[str]] = (),
        *,
        unavailable: bool = False,
        error: Optional[Exception] = None,
    ) -> None:
        self.names: List[Optional[str]] = list(names)
        self.unavailable = unavailable
        self.error = error
        self.calls = 0

    def enumerate_capabilities(self) -> Optional[Sequence[FeatureInfo]]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        if self.unavailable:
            return None
        return [FeatureInfo(name=n) for n in self.names]


class DictStringResources:
    """String resources backed by a mapping; unknown keys raise ``KeyError``."""

    def __init__(self, strings: Mapping[str, str]) -> None:
        self._strings: Dict[str, str] = dict(strings)
        self.calls = 0

    def get_string(self, resource_key: str) -> str:
        self.calls += 1
        return self._strings[resource_key]


class StaticPackageInfoProvider:
    """Package metadata keyed by package name; unknown names raise ``KeyError``."""

    def __init__(self, packages: Iterable[PackageInfo] = ()) -> None:
        self._packages: Dict[str, PackageInfo] = {p.package_name: p for p in packages}

    def get_package_info(self, package_name: str) -> PackageInfo:
        return self._packages[package_name]


class StaticTaskInfoProvider:
    """Running tasks from a fixed list (most recent first)."""

    def __init__(self, top_activities: Iterable[Optional[str]] = ()) -> None:
        self._tasks = [RunningTaskInfo(top_activity=a) for a in top_activities]

    def get_running_tasks(self, max_num: int) -> Sequence[RunningTaskInfo]:
        return self._tasks[:max_num]


__all__ = [
    "StaticCapabilityEnumerator",
    "DictStringResources",
    "StaticPackageInfoProvider",
    "StaticTaskInfoProvider",
]
