"""Pydantic data transfer objects shared across the core."""

from .core_params import CoreParams
from .event import AccessibilityEventData
from .feature_info import FeatureInfo
from .package_info import PackageInfo
from .task_info import RunningTaskInfo

__all__ = [
    "CoreParams",
    "AccessibilityEventData",
    "FeatureInfo",
    "PackageInfo",
    "RunningTaskInfo",
]
