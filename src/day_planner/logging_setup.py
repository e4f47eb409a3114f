# src/day_planner/logging_setup.py

from __future__ import annotations

"""
Logging for the planner.

Schedule lines, conflict alerts and "Error: ..." replies are written to stdout by
the emitter; logging never touches stdout. Diagnostics go to stderr (quiet by
default, WARNING) and, when DAYPLAN_LOG_TO_FILE is on, to <data_dir>/day_planner.log.
"""

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "day_planner.log"
APP_LOGGER = "day_planner"

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


class _ConsoleNoiseFilter(logging.Filter):
    """Planner records pass at the handler level; anything else (py.warnings, libraries) needs ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == APP_LOGGER or record.name.startswith(APP_LOGGER + "."):
            return True
        return record.levelno >= logging.ERROR


def _stderr_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_FORMATTER)
    handler.addFilter(_ConsoleNoiseFilter())
    return handler


def _file_handler(log_dir: Path, level: int) -> tuple[logging.Handler, Path]:
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME
    handler = logging.FileHandler(str(log_file), encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(_FORMATTER)
    return handler, log_file


def setup_logging(
    *,
    log_dir: str | Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path | None:
    """
    Install the stderr handler and, when log_dir is given, the log file handler.

    Replaces any handlers already on the root logger, so calling it twice does not
    duplicate output. Returns the log file path, or None without a log_dir.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(_stderr_handler(console_level))

    log_file: Path | None = None
    if log_dir is not None:
        fh, log_file = _file_handler(Path(log_dir), file_level)
        root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
