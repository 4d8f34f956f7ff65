"""
Collaborator interfaces (Protocols) consumed by the core.

Re-exports the single-class modules under
``talkback_core.base.interfaces_parts`` while keeping imports stable.
"""

from __future__ import annotations

from .interfaces_parts import (
    CapabilityEnumerator,
    HasName,
    PackageInfoProvider,
    StringResourceProvider,
    TaskInfoProvider,
    TypeResolver,
)

__all__ = [
    "CapabilityEnumerator",
    "HasName",
    "PackageInfoProvider",
    "StringResourceProvider",
    "TaskInfoProvider",
    "TypeResolver",
]
