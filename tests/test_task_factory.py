# tests/test_task_factory.py

from __future__ import annotations

import dataclasses
from datetime import datetime, time, timedelta, timezone

import pytest

from day_planner.tasks.errors import InvalidInputError, ScheduleError
from day_planner.tasks.task_factory import create_task, parse_timestamp
from day_planner.tasks.task_models import Task, TaskPriority

from .conftest import DAY


def test_create_task_parses_times_on_given_day() -> None:
    task = create_task("Morning Exercise", "07:00", "08:00", "High", day=DAY)

    assert task.description == "Morning Exercise"
    assert task.start == datetime(2024, 5, 1, 7, 0)
    assert task.end == datetime(2024, 5, 1, 8, 0)
    assert task.priority == "High"
    assert task.completed is False


def test_create_task_defaults_to_today() -> None:
    task = create_task("Lunch", "12:00", "13:00", "Low")
    assert task.start.date() == datetime.now().date()
    assert task.start.time() == time(12, 0)


@pytest.mark.parametrize(
    ("start_text", "end_text"),
    [
        ("08:00", "07:00"),
        ("07:00", "07:00"),
        ("not a time", "08:00"),
        ("07:00", ""),
        ("25:00", "26:00"),
    ],
)
def test_create_task_rejects_bad_input(start_text: str, end_text: str) -> None:
    with pytest.raises(InvalidInputError) as exc:
        create_task("x", start_text, end_text, "Low", day=DAY)

    assert "start time must be before end time" in str(exc.value)
    assert isinstance(exc.value, ScheduleError)
    assert isinstance(exc.value, ValueError)


def test_parse_timestamp_accepts_common_forms() -> None:
    assert parse_timestamp("7:05", day=DAY) == datetime(2024, 5, 1, 7, 5)
    assert parse_timestamp("07:05:30", day=DAY) == datetime(2024, 5, 1, 7, 5, 30)
    assert parse_timestamp("7:05 pm", day=DAY) == datetime(2024, 5, 1, 19, 5)
    assert parse_timestamp("2024-06-02T09:15", day=DAY) == datetime(2024, 6, 2, 9, 15)
    assert parse_timestamp("2024-06-02 09:15") == datetime(2024, 6, 2, 9, 15)
    assert parse_timestamp("   ", day=DAY) is None
    assert parse_timestamp(None, day=DAY) is None


def test_priority_is_normalized_but_free_text_kept() -> None:
    assert create_task("a", "07:00", "08:00", " high ", day=DAY).priority == TaskPriority.HIGH
    assert create_task("b", "07:00", "08:00", "Urgent", day=DAY).priority == "Urgent"


def test_task_constructor_enforces_start_before_end() -> None:
    with pytest.raises(InvalidInputError):
        Task("x", datetime(2024, 5, 1, 9), datetime(2024, 5, 1, 8), "Low")


def test_task_formats_line_and_overlap() -> None:
    a = create_task("Morning Exercise", "07:00", "08:00", "High", day=DAY)
    b = create_task("Overlap", "07:30", "08:30", "Low", day=DAY)
    c = create_task("Breakfast", "08:00", "08:30", "Low", day=DAY)

    assert str(a) == "07:00 - 08:00: Morning Exercise [High]"
    assert a.overlaps(b) and b.overlaps(a)
    # Touching intervals do not overlap.
    assert not a.overlaps(c)
    assert not c.overlaps(a)


def test_tasks_compare_by_identity() -> None:
    a = create_task("Same", "07:00", "08:00", "High", day=DAY)
    b = create_task("Same", "07:00", "08:00", "High", day=DAY)
    assert a != b
    assert a == a


def test_parse_timestamp_twelve_hour_with_seconds() -> None:
    assert parse_timestamp("7:05:30 am", day=DAY) == datetime(2024, 5, 1, 7, 5, 30)
    assert parse_timestamp("12:00:00 PM", day=DAY) == datetime(2024, 5, 1, 12, 0)


def test_parse_timestamp_folds_offsets_into_local_naive_time() -> None:
    parsed = parse_timestamp("2024-06-02T09:15:00+00:00")
    expected = datetime(2024, 6, 2, 9, 15, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)

    assert parsed == expected
    assert parsed.tzinfo is None

    # Aware and naive inputs can be mixed in one task.
    end_text = (expected + timedelta(hours=1)).isoformat()
    task = create_task("Call", "2024-06-02T09:15:00+00:00", end_text, "Low")
    assert task.start == expected


@pytest.mark.parametrize("name", ["description", "start", "end", "priority", "completed"])
def test_task_value_fields_are_read_only(name: str) -> None:
    task = create_task("Morning Exercise", "07:00", "08:00", "High", day=DAY)

    with pytest.raises(dataclasses.FrozenInstanceError):
        setattr(task, name, getattr(task, name))


def test_mark_completed_is_the_only_mutation() -> None:
    task = create_task("Morning Exercise", "07:00", "08:00", "High", day=DAY)
    task.mark_completed()

    assert task.completed is True
    assert task.start == datetime(2024, 5, 1, 7, 0)
