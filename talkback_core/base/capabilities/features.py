"""Well-known host capability names queried by the accessibility pipeline.

String constants (no Enum) so they can be passed straight to
``CapabilityCache.has_capability`` and compared with enumerated names.
"""

from __future__ import annotations

FEATURE_TOUCHSCREEN = "android.hardware.touchscreen"
FEATURE_TOUCHSCREEN_MULTITOUCH = "android.hardware.touchscreen.multitouch"
FEATURE_TELEPHONY = "android.hardware.telephony"
FEATURE_SENSOR_PROXIMITY = "android.hardware.sensor.proximity"
FEATURE_SENSOR_ACCELEROMETER = "android.hardware.sensor.accelerometer"

__all__ = [
    "FEATURE_TOUCHSCREEN",
    "FEATURE_TOUCHSCREEN_MULTITOUCH",
    "FEATURE_TELEPHONY",
    "FEATURE_SENSOR_PROXIMITY",
    "FEATURE_SENSOR_ACCELEROMETER",
]
