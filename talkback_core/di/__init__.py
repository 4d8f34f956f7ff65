"""Dependency injection container."""

from .container import CoreContainer, build_container

__all__ = ["CoreContainer", "build_container"]
