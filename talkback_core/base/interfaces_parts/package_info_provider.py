"""PackageInfoProvider Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..dto import PackageInfo


@runtime_checkable
class PackageInfoProvider(Protocol):
    """Reads installed package metadata.

    Implementations raise ``LookupError`` (``KeyError`` is fine) when the
    package is not installed.
    """

    def get_package_info(self, package_name: str) -> PackageInfo:  # pragma: no cover - interface
        """Return metadata for ``package_name``."""
        ...
