# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from day_planner.cli.bootstrap import create_initial_state
from day_planner.core.state import AppState
from day_planner.tasks.schedule_manager import ScheduleManager

from .fakes import CapturedOutput

DAY = date(2024, 5, 1)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="day-planner-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "data",
        demo_enabled=True,
        console_enabled=False,
    )


@pytest.fixture()
def output() -> CapturedOutput:
    return CapturedOutput()


@pytest.fixture()
def schedule(output: CapturedOutput) -> ScheduleManager:
    """Bare schedule (no observers) writing into `output`."""
    return ScheduleManager(emit=output)


@pytest.fixture()
def state(settings: SimpleNamespace, output: CapturedOutput) -> AppState:
    """AppState wired like the real app (conflict notifier attached), output captured."""
    return create_initial_state(settings=settings, emit=output)
