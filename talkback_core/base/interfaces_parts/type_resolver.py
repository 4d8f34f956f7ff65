"""TypeResolver Protocol (single-class module).

Maps an event's source class name to a type handle and classifies it.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class TypeResolver(Protocol):
    """Resolves and classifies the runtime type of an event source."""

    def resolve_type(self, context: Any, class_name: str, package_name: str) -> Optional[Any]:  # pragma: no cover - interface
        """Return an opaque type handle, or ``None`` when the type is unknown.

        Implementations typically cache handles per (package, class) pair.
        """
        ...

    def is_toggle_control_type(self, type_handle: Any) -> bool:  # pragma: no cover - interface
        """Return True if ``type_handle`` is a two-state (checkable) control."""
        ...
