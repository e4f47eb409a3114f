# src/day_planner/tasks/task_factory.py

from __future__ import annotations

import logging
from datetime import date, datetime

from .errors import InvalidInputError
from .task_models import Task, TaskPriority

logger = logging.getLogger(__name__)

INVALID_TIMES_MESSAGE = "Invalid time format or start time must be before end time."

# Time-of-day forms, anchored to the schedule day.
_TIME_FORMATS: tuple[str, ...] = (
    "%H:%M",
    "%H:%M:%S",
    "%I:%M %p",
    "%I:%M:%S %p",
)


def parse_timestamp(text: str | None, *, day: date | None = None) -> datetime | None:
    """
    Parse a user-supplied timestamp.

    Accepts a bare time of day ("07:00", "7:00", "7:00 PM") or a full ISO datetime
    ("2024-05-01T07:00"). A bare time is placed on `day` (today if omitted).
    Returns None when the text is not understood.
    """
    raw = (text or "").strip()
    if not raw:
        return None

    anchor = day or date.today()
    for fmt in _TIME_FORMATS:
        try:
            parsed = datetime.strptime(raw.upper(), fmt)
        except ValueError:
            continue
        return datetime.combine(anchor, parsed.time())

    try:
        parsed_dt = datetime.fromisoformat(raw)
    except ValueError:
        return None

    # Offsets are folded into local wall time so all tasks compare as naive values.
    if parsed_dt.tzinfo is not None:
        parsed_dt = parsed_dt.astimezone().replace(tzinfo=None)
    return parsed_dt


def create_task(
    description: str,
    start_text: str,
    end_text: str,
    priority: str,
    *,
    day: date | None = None,
) -> Task:
    """
    Validate raw text input and build a Task (completed=False).

    Raises InvalidInputError when either timestamp does not parse or start >= end.
    """
    start = parse_timestamp(start_text, day=day)
    end = parse_timestamp(end_text, day=day)

    if start is None or end is None or start >= end:
        logger.debug(
            "Rejected task input description=%r start=%r end=%r", description, start_text, end_text
        )
        raise InvalidInputError(INVALID_TIMES_MESSAGE)

    return Task(
        description=description,
        start=start,
        end=end,
        priority=TaskPriority.normalize(priority),
    )
