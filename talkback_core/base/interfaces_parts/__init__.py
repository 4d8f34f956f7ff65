"""Interfaces (Protocols) split into single-class modules.

One Protocol per file; ``talkback_core.base.interfaces`` re-exports them as a
stable API.
"""

from .has_name import HasName
from .capability_enumerator import CapabilityEnumerator
from .type_resolver import TypeResolver
from .string_resource_provider import StringResourceProvider
from .package_info_provider import PackageInfoProvider
from .task_info_provider import TaskInfoProvider

__all__ = [
    "HasName",
    "CapabilityEnumerator",
    "TypeResolver",
    "StringResourceProvider",
    "PackageInfoProvider",
    "TaskInfoProvider",
]
