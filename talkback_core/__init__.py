"""talkback_core package

Accessibility pipeline core: a host capability cache and the event text
aggregator, plus small package/activity lookup helpers. Every host service is
reached through a narrow Protocol (``talkback_core.base.interfaces``), so the
core runs unchanged against a real host binding or the in-memory doubles in
``talkback_core.mock``.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`TalkBackError`, :class:`ErrorCode`
    - Components: :class:`CapabilityCache`, :class:`StateLabels`,
      :class:`EventTextAggregator`, :class:`ClassHierarchyTypeResolver`
    - Helpers: :func:`get_version_code`, :func:`get_version_name`,
      :func:`get_current_activity_name`
    - Wiring: :class:`CoreContainer`, :func:`build_container`
"""

from .base.capabilities import CapabilityCache
from .base.constants import INVALID_VERSION_CODE
from .base.dto import AccessibilityEventData, CoreParams, FeatureInfo, PackageInfo, RunningTaskInfo
from .base.errors import ErrorCode, TalkBackError
from .base.labels import StateLabelPair, StateLabels
from .base.text import ClassHierarchyTypeResolver, EventTextAggregator
from .base.utils import get_current_activity_name, get_version_code, get_version_name
from .di import CoreContainer, build_container

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "TalkBackError",
    "ErrorCode",
    "CapabilityCache",
    "StateLabelPair",
    "StateLabels",
    "EventTextAggregator",
    "ClassHierarchyTypeResolver",
    "AccessibilityEventData",
    "CoreParams",
    "FeatureInfo",
    "PackageInfo",
    "RunningTaskInfo",
    "INVALID_VERSION_CODE",
    "get_version_code",
    "get_version_name",
    "get_current_activity_name",
    "CoreContainer",
    "build_container",
]
