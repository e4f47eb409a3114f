# src/day_planner/tasks/errors.py

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .task_models import Task


class ScheduleError(Exception):
    """Base class for every error the scheduler reports to its caller."""


class InvalidInputError(ScheduleError, ValueError):
    """Unparsable timestamp text, or start not before end."""


class ConflictError(ScheduleError):
    """A new task overlaps a task that is already scheduled."""

    def __init__(self, existing: Task) -> None:
        self.existing = existing
        super().__init__(f'Task conflicts with existing task "{existing.description}".')


class NotFoundError(ScheduleError, LookupError):
    """No scheduled task matches the given description."""
