# src/day_planner/cli/commands.py

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.errors import ScheduleError
from ..tasks.task_factory import create_task, parse_timestamp
from ..tasks.task_models import TaskPriority

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

ADD_USAGE = (
    'Usage: /add "<description>" <start> <end> [priority]'
    ' (times: 09:00, 9:00 AM or "9:00 AM")'
)

MERIDIEM = ("AM", "PM")


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like '/command args'. Arguments are shell-split, so quotes group words.
        Returns a reply string or None if not a command.

        Scheduler errors are reported as "Error: <message>" instead of propagating.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError:
            return "Unbalanced quotes in command."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except ScheduleError as e:
            logger.debug("/%s failed: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    total = len(state.schedule)
    done = sum(1 for t in state.schedule.tasks if t.completed)
    return (
        "Status:\n"
        f"  Tasks scheduled: {total}\n"
        f"  Completed: {done}"
    )


def _join_meridiem(args: list[str]) -> list[str]:
    """Glue a split-off AM/PM token back onto the time before it ("1:00", "PM" -> "1:00 PM")."""
    out: list[str] = []
    for arg in args:
        if arg.upper() in MERIDIEM and out and parse_timestamp(out[-1]) is not None:
            out[-1] = f"{out[-1]} {arg}"
        else:
            out.append(arg)
    return out


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add "Team Meeting" 09:00 10:00 Medium
    /add Lunch 12:00 13:00            -> priority defaults to Medium
    /add Lunch 1:00 PM 2:00 PM Low    -> 12-hour times need no quoting

    Unquoted multi-word descriptions work too, as long as a priority is given last.
    """
    args = _join_meridiem(args)
    if len(args) < 3:
        return ADD_USAGE

    if parse_timestamp(args[-1]) is not None:
        *desc_parts, start_text, end_text = args
        priority = TaskPriority.MEDIUM.value
    else:
        if len(args) < 4:
            return ADD_USAGE
        *desc_parts, start_text, end_text, priority = args

    description = " ".join(desc_parts).strip()
    if not description:
        return ADD_USAGE

    task = create_task(description, start_text, end_text, priority)
    state.schedule.add_task(task)
    return f"Added: {task.format_line()}"


def cmd_remove(state: AppState, args: list[str]) -> str:
    if not args:
        return 'Usage: /remove "<description>"'
    task = state.schedule.remove_task(" ".join(args))
    return f"Removed: {task.description}"


def cmd_done(state: AppState, args: list[str]) -> str:
    if not args:
        return 'Usage: /done "<description>"'
    task = state.schedule.complete_task(" ".join(args))
    return f"Completed: {task.description}"


def cmd_view(state: AppState, args: list[str]) -> str:
    lines: list[str] = []
    state.schedule.view_tasks(emit=lines.append)
    return "\n".join(lines)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task counts.")
registry.register(
    "add",
    cmd_add,
    help_text='Add a task: /add "<description>" <start> <end> [priority] (e.g. 09:00 or 9:00 AM).',
)
registry.register("remove", cmd_remove, help_text="Remove a task by description.", aliases=["rm"])
registry.register("done", cmd_done, help_text="Mark a task completed by description.")
registry.register("view", cmd_view, help_text="Show the day ordered by start time.", aliases=["ls"])
