# src/day_planner/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the ScheduleManager instance the rest of the app shares,
- wires the conflict notifier as its observer.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Emitter
from ..core.state import AppState
from ..tasks.conflict_notifier import ConflictNotifier
from ..tasks.schedule_manager import ScheduleManager

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, emit: Emitter = print) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    schedule = ScheduleManager(emit=emit)
    schedule.add_observer(ConflictNotifier(emit=emit))

    logger.debug("Schedule ready (observers=1)")
    return AppState(settings=settings, schedule=schedule, emit=emit)
