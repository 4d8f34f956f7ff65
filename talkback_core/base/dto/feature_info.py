"""Single enumerated host capability."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class FeatureInfo(BaseModel):
    """One entry returned by a capability enumeration.

    ``name`` may be ``None``: hosts report non-named entries (for example a
    graphics API version) alongside named features.
    """

    name: Optional[str] = None

    model_config = {"frozen": True}


__all__ = ["FeatureInfo"]
