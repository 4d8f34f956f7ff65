"""Installed package metadata returned by a package info provider."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class PackageInfo(BaseModel):
    """Version metadata for one installed package."""

    package_name: str
    version_code: int
    version_name: Optional[str] = None


__all__ = ["PackageInfo"]
