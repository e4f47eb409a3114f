# src/day_planner/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.schedule_manager import ScheduleManager
from .ports import Emitter


@dataclass(slots=True)
class AppState:
    # Settings object (config.Settings in the app, SimpleNamespace in tests).
    settings: Any

    schedule: ScheduleManager
    emit: Emitter = print
