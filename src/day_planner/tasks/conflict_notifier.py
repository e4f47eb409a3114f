# src/day_planner/tasks/conflict_notifier.py

from __future__ import annotations

"""
Conflict notifier.

An observer that scans the schedule snapshot after every add and prints an alert
for each task overlapping the new one.

ScheduleManager.add_task already rejects overlapping tasks, so on the normal path
this scan finds nothing. It stays wired in so that any future relaxation of the
add-time check is still reported to the user.
"""

import logging
from collections.abc import Sequence

from ..core.ports import Emitter
from .task_models import Task

logger = logging.getLogger(__name__)


class ConflictNotifier:
    def __init__(self, emit: Emitter = print) -> None:
        self._emit = emit

    def on_task_added(self, new_task: Task, all_tasks: Sequence[Task]) -> None:
        for task in conflicts_for(new_task, all_tasks):
            text = f'Conflict Alert: New task "{new_task.description}" conflicts with "{task.description}".'
            logger.warning("Conflict: %r overlaps %r", new_task.description, task.description)
            try:
                self._emit(text)
            except Exception:
                logger.debug("Conflict alert emit failed.", exc_info=True)


def conflicts_for(new_task: Task, all_tasks: Sequence[Task]) -> list[Task]:
    """Tasks in all_tasks (other than new_task itself) that overlap new_task."""
    out: list[Task] = []
    for task in all_tasks:
        if task is not new_task and new_task.overlaps(task):
            out.append(task)
    return out
