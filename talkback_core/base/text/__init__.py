"""Event text aggregation and source type resolution."""

from .event_text import EventTextAggregator, find_state_fragment, join_fragments
from .type_registry import FRAMEWORK_TOGGLE_HIERARCHY, ClassHierarchyTypeResolver, TypeHandle

__all__ = [
    "FRAMEWORK_TOGGLE_HIERARCHY",
    "ClassHierarchyTypeResolver",
    "EventTextAggregator",
    "TypeHandle",
    "find_state_fragment",
    "join_fragments",
]
