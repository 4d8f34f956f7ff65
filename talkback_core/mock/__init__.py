"""In-memory collaborator doubles for tests and offline wiring."""

from .collaborators import (
    DictStringResources,
    StaticCapabilityEnumerator,
    StaticPackageInfoProvider,
    StaticTaskInfoProvider,
)

__all__ = [
    "DictStringResources",
    "StaticCapabilityEnumerator",
    "StaticPackageInfoProvider",
    "StaticTaskInfoProvider",
]
