# src/day_planner/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from .errors import InvalidInputError

TIME_FMT = "%H:%M"


class TaskPriority(StrEnum):
    """
    Conventional priority labels.

    Priority stays free text on Task; these are only the canonical spellings.
    """

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def normalize(cls, raw: str | None) -> str:
        text = (raw or "").strip()
        for member in cls:
            if member.value.lower() == text.lower():
                return member.value
        return text


@dataclass(frozen=True, slots=True, eq=False)
class Task:
    """
    One scheduled interval [start, end).

    Frozen so a scheduled task can never be moved into an overlap; `completed`
    changes only through mark_completed(). Equality is identity: two tasks with
    the same fields are still two different tasks.
    """

    description: str
    start: datetime
    end: datetime
    priority: str
    completed: bool = field(default=False)

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise InvalidInputError("Start time must be before end time.")

    def mark_completed(self) -> None:
        object.__setattr__(self, "completed", True)

    def overlaps(self, other: Task) -> bool:
        return self.start < other.end and self.end > other.start

    def format_line(self) -> str:
        return (
            f"{self.start.strftime(TIME_FMT)} - {self.end.strftime(TIME_FMT)}: "
            f"{self.description} [{self.priority}]"
        )

    def __str__(self) -> str:
        return self.format_line()
