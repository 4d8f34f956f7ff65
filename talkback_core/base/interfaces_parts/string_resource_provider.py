"""StringResourceProvider Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StringResourceProvider(Protocol):
    """Looks up localized strings by resource key."""

    def get_string(self, resource_key: str) -> str:  # pragma: no cover - interface
        """Return the localized string for ``resource_key``."""
        ...
