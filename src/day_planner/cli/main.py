# src/day_planner/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then:
- runs the built-in demo schedule (optional, on by default),
- starts the console REPL (optional, off by default).

Scheduler errors are printed as "Error: <message>"; they never fail the process.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..tasks.errors import ScheduleError
from ..tasks.task_factory import create_task

logger = logging.getLogger(__name__)

DEMO_TASKS: tuple[tuple[str, str, str, str], ...] = (
    ("Morning Exercise", "07:00", "08:00", "High"),
    ("Team Meeting", "09:00", "10:00", "Medium"),
)


def run_demo(state: AppState, tasks=DEMO_TASKS) -> bool:
    """
    Add each (description, start, end, priority) entry, then view the schedule.

    Stops at the first scheduler error and reports it. Returns True on success.
    """
    try:
        for description, start_text, end_text, priority in tasks:
            task = create_task(description, start_text, end_text, priority)
            state.schedule.add_task(task)

        state.schedule.view_tasks()
    except ScheduleError as e:
        logger.info("Demo stopped: %s", e)
        state.emit(f"Error: {e}")
        return False
    return True


def resolve_log_level(name: str | None, default: int = logging.WARNING) -> int:
    """Map a level name ("info", "DEBUG", ...) to its number; unknown names fall back to default."""
    level = logging.getLevelNamesMapping().get(str(name or "").strip().upper())
    return default if level is None else level


def main() -> None:
    settings = get_settings()

    console_level = resolve_log_level(getattr(settings, "log_level", "WARNING"))

    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    if settings.demo_enabled:
        run_demo(state)

    if settings.console_enabled:
        run_console_loop(state)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
