"""CapabilityEnumerator Protocol (single-class module).

Source of host capability names for the capability cache.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from .has_name import HasName


@runtime_checkable
class CapabilityEnumerator(Protocol):
    """Enumerates every capability the host reports.

    Three outcomes are distinguished:

    - a sequence of entries exposing ``name``: enumeration succeeded (the
      sequence may be empty);
    - ``None``: the enumeration API is unavailable on this host;
    - an exception: enumeration failed while invoking or reading results.

    An implementation may also omit ``enumerate_capabilities`` altogether,
    which the cache treats like ``None``.
    """

    def enumerate_capabilities(self) -> Optional[Sequence[HasName]]:  # pragma: no cover - interface
        """Return all host capabilities, or ``None`` when unavailable."""
        ...
