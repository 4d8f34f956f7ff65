"""Running task summary returned by a task info provider."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class RunningTaskInfo(BaseModel):
    """A running task; ``top_activity`` is the class name of its top activity."""

    top_activity: Optional[str] = None


__all__ = ["RunningTaskInfo"]
