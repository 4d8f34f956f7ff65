"""Class-hierarchy based type resolver.

Event sources are identified by class and package name only. This resolver
answers from a registry of known class hierarchies: each registered class maps
to its ancestor chain, and the handle returned for a class is that chain
(class first). The toggle base class is always registered as a root. Lookups
are cached per class name, including misses; registering classes drops the
cache.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ..constants import COMPOUND_BUTTON_CLASS

TypeHandle = Tuple[str, ...]

# Framework two-state widgets and their direct base classes.
FRAMEWORK_TOGGLE_HIERARCHY: Dict[str, Optional[str]] = {
    COMPOUND_BUTTON_CLASS: None,
    "android.widget.CheckBox": COMPOUND_BUTTON_CLASS,
    "android.widget.RadioButton": COMPOUND_BUTTON_CLASS,
    "android.widget.ToggleButton": COMPOUND_BUTTON_CLASS,
    "android.widget.Switch": COMPOUND_BUTTON_CLASS,
}


class ClassHierarchyTypeResolver:
    """:class:`~talkback_core.base.interfaces.TypeResolver` over a class registry.

    Parameters
    ----------
    hierarchy:
        Mapping of class name to its direct base class name (``None`` or
        absent for roots).
    toggle_base:
        Class whose subclasses (and itself) are toggle controls. Registered
        as a root unless ``hierarchy`` already gives it a base.
    """

    def __init__(
        self,
        hierarchy: Optional[Mapping[str, Optional[str]]] = None,
        *,
        toggle_base: str = COMPOUND_BUTTON_CLASS,
    ) -> None:
        self._parents: Dict[str, Optional[str]] = dict(hierarchy or {})
        self._parents.setdefault(toggle_base, None)
        self._toggle_base = toggle_base
        self._cache: Dict[str, Optional[TypeHandle]] = {}
        self._lock = threading.Lock()

    @classmethod
    def with_framework_classes(cls, *, toggle_base: str = COMPOUND_BUTTON_CLASS) -> "ClassHierarchyTypeResolver":
        """Return a resolver preloaded with the framework toggle widgets."""
        resolver = cls(toggle_base=toggle_base)
        resolver.register_many(FRAMEWORK_TOGGLE_HIERARCHY.items())
        return resolver

    def register(self, class_name: str, base_name: Optional[str] = None) -> None:
        """Add or replace one class; drops cached handles."""
        with self._lock:
            self._parents[class_name] = base_name
            self._cache.clear()

    def register_many(self, entries: Iterable[Tuple[str, Optional[str]]]) -> None:
        """Add or replace several ``(class, base)`` pairs; drops cached handles."""
        with self._lock:
            self._parents.update(entries)
            self._cache.clear()

    def resolve_type(self, context: Any, class_name: str, package_name: str) -> Optional[TypeHandle]:
        with self._lock:
            if class_name not in self._cache:
                self._cache[class_name] = self._ancestry(class_name)
            return self._cache[class_name]

    def is_toggle_control_type(self, type_handle: Any) -> bool:
        return isinstance(type_handle, tuple) and self._toggle_base in type_handle

    def _ancestry(self, class_name: str) -> Optional[TypeHandle]:
        if class_name not in self._parents:
            return None
        chain = []
        current: Optional[str] = class_name
        while current is not None and current not in chain:
            chain.append(current)
            current = self._parents.get(current)
        return tuple(chain)


__all__ = ["ClassHierarchyTypeResolver", "FRAMEWORK_TOGGLE_HIERARCHY", "TypeHandle"]
