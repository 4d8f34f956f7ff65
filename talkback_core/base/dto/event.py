"""Accessibility event payload consumed by the event text aggregator.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation.

Notes
-----
``text`` keeps the fragments in delivery order; duplicates are meaningful and
are never collapsed.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class AccessibilityEventData(BaseModel):
    """Source class/package and text fragments of one accessibility event.

    Attributes
    ----------
    class_name:
        Fully qualified class name of the view that produced the event.
    package_name:
        Package the source view belongs to.
    text:
        Ordered text fragments attached to the event.
    """

    class_name: str
    package_name: str
    text: List[str] = Field(default_factory=list)


__all__ = ["AccessibilityEventData"]
