"""Installed package version helpers.

Both helpers log and return a sentinel when the package is not installed
(the provider raised ``LookupError``); other provider errors propagate.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..constants import INVALID_VERSION_CODE
from ..dto import PackageInfo
from ..errors import wrap_exception
from ..interfaces import PackageInfoProvider
from ..logging import LogContext, get_logger, log_event

_COMPONENT = "packages"
_logger = get_logger(__name__)


def _lookup(provider: PackageInfoProvider, package_name: str) -> Optional[PackageInfo]:
    try:
        return provider.get_package_info(package_name)
    except LookupError as exc:
        err = wrap_exception(exc, _COMPONENT)
        log_event(
            _logger,
            "packages.not_found",
            LogContext(component=_COMPONENT, package_name=package_name),
            level=logging.ERROR,
            error_code=err.code.value,
            error=f"Could not find package: {package_name}",
        )
        return None


def get_version_code(provider: PackageInfoProvider, package_name: str) -> int:
    """Return the version code of ``package_name``, or ``INVALID_VERSION_CODE``."""
    info = _lookup(provider, package_name)
    return INVALID_VERSION_CODE if info is None else info.version_code


def get_version_name(provider: PackageInfoProvider, package_name: str) -> Optional[str]:
    """Return the version name of ``package_name``, or ``None`` if not installed."""
    info = _lookup(provider, package_name)
    return None if info is None else info.version_name


__all__ = ["get_version_code", "get_version_name"]
