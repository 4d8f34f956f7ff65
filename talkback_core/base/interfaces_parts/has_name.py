"""HasName Protocol (single-class module)."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HasName(Protocol):
    """Object exposing a ``name`` attribute (e.g. an enumerated feature)."""

    name: Optional[str]
