"""Capabilities package.

Exports the host capability cache and well-known capability names.
"""

from .core import CapabilityCache
from .features import (
    FEATURE_SENSOR_ACCELEROMETER,
    FEATURE_SENSOR_PROXIMITY,
    FEATURE_TELEPHONY,
    FEATURE_TOUCHSCREEN,
    FEATURE_TOUCHSCREEN_MULTITOUCH,
)

__all__ = [
    "CapabilityCache",
    "FEATURE_SENSOR_ACCELEROMETER",
    "FEATURE_SENSOR_PROXIMITY",
    "FEATURE_TELEPHONY",
    "FEATURE_TOUCHSCREEN",
    "FEATURE_TOUCHSCREEN_MULTITOUCH",
]
