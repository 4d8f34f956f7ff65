"""Foreground activity lookup."""

from __future__ import annotations

from typing import Optional

from ..interfaces import TaskInfoProvider


def get_current_activity_name(provider: TaskInfoProvider) -> Optional[str]:
    """Return the class name of the most recent task's top activity.

    ``None`` when the provider reports no running task.
    """
    tasks = provider.get_running_tasks(1)
    if not tasks:
        return None
    return tasks[0].top_activity


__all__ = ["get_current_activity_name"]
