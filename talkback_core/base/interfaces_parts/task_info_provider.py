"""TaskInfoProvider Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..dto import RunningTaskInfo


@runtime_checkable
class TaskInfoProvider(Protocol):
    """Reports running tasks, most recent first."""

    def get_running_tasks(self, max_num: int) -> Sequence[RunningTaskInfo]:  # pragma: no cover - interface
        """Return at most ``max_num`` running tasks."""
        ...
