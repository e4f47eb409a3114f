# src/day_planner/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the scheduler.

The schedule depends on Protocols instead of concrete implementations, so output
sinks and observers stay swappable and easy to fake in tests.
"""

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task

Emitter = Callable[[str], None]
# Receives one user-visible output line (console print by default).


class TaskObserver(Protocol):
    """
    Called synchronously after a task was added to the schedule.

    all_tasks is a read-only snapshot that already includes new_task.
    """

    def on_task_added(self, new_task: Task, all_tasks: Sequence[Task]) -> None: ...
