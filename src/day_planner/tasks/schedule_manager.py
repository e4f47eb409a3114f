# src/day_planner/tasks/schedule_manager.py

from __future__ import annotations

"""
Schedule manager.

Owns the single-day schedule:
- keeps tasks in insertion order,
- rejects a task whose [start, end) interval overlaps an existing one,
- notifies registered observers after every successful add,
- renders the day sorted by start time.

Callers and observers only ever see tuples; the underlying list never leaves this class.
"""

import logging
from collections.abc import Iterable

from ..core.ports import Emitter, TaskObserver
from .errors import ConflictError, NotFoundError
from .task_models import Task

logger = logging.getLogger(__name__)

EMPTY_SCHEDULE_MESSAGE = "No tasks scheduled for the day."


class ScheduleManager:
    def __init__(
        self,
        *,
        emit: Emitter = print,
        observers: Iterable[TaskObserver] = (),
    ) -> None:
        self._emit = emit
        self._tasks: list[Task] = []
        self._observers: list[TaskObserver] = list(observers)

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of the schedule in insertion order."""
        return tuple(self._tasks)

    # ---- observers ----

    def add_observer(self, observer: TaskObserver) -> None:
        self._observers.append(observer)

    def _notify_observers(self, task: Task) -> None:
        snapshot = tuple(self._tasks)
        for observer in self._observers:
            observer.on_task_added(task, snapshot)

    # ---- mutations ----

    def find_conflict(self, task: Task) -> Task | None:
        for existing in self._tasks:
            if task.overlaps(existing):
                return existing
        return None

    def add_task(self, task: Task) -> None:
        """
        Append task unless it overlaps an existing one.

        Raises ConflictError naming the first overlapping task; the schedule and
        observers are left untouched in that case.
        """
        existing = self.find_conflict(task)
        if existing is not None:
            logger.info(
                "Rejected task %r: overlaps %r", task.description, existing.description
            )
            raise ConflictError(existing)

        self._tasks.append(task)
        logger.debug("Added task %r (%s)", task.description, task.format_line())
        self._notify_observers(task)

    def _find(self, description: str) -> Task:
        for task in self._tasks:
            if task.description == description:
                return task
        raise NotFoundError("Task not found.")

    def remove_task(self, description: str) -> Task:
        """Remove the first task with exactly this description and return it."""
        task = self._find(description)
        self._tasks.remove(task)
        logger.debug("Removed task %r", description)
        return task

    def complete_task(self, description: str) -> Task:
        task = self._find(description)
        task.mark_completed()
        logger.debug("Completed task %r", description)
        return task

    # ---- views ----

    def sorted_tasks(self) -> list[Task]:
        # sorted() is stable: equal start times keep insertion order.
        return sorted(self._tasks, key=lambda t: t.start)

    def view_tasks(self, emit: Emitter | None = None) -> list[str]:
        """
        Emit the day's schedule, one line per task ordered by start time.

        An empty schedule emits a single "no tasks" line. Returns the emitted lines.
        """
        out = emit or self._emit

        if not self._tasks:
            lines = [EMPTY_SCHEDULE_MESSAGE]
        else:
            lines = [task.format_line() for task in self.sorted_tasks()]

        for line in lines:
            out(line)
        return lines
