"""
Logging setup for the podenv CLI.

main.py calls ``setup_logging`` once per invocation; modules log through
``logging.getLogger(__name__)``.  The level comes from the -v/-q/--debug
flags, else PODENV_LOG_LEVEL, else WARNING.  PODENV_LOG_FILE adds a file
log, with its own level in PODENV_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import sys

_CONSOLE_FORMAT = "podenv: %(message)s"
_DETAILED_FORMAT = "%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Route podenv's log records to stderr and, optionally, a file.

    Replaces any handlers already on the root logger, so calling it twice
    does not duplicate output.
    """
    console_level = _parse_level(level)
    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    # File and line only help when debugging
    console.setFormatter(logging.Formatter(
        _DETAILED_FORMAT if console_level <= logging.DEBUG else _CONSOLE_FORMAT
    ))
    handlers.append(console)

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(_DETAILED_FORMAT))
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(min(h.level for h in handlers))


def _parse_level(level: str | None) -> int:
    """Map a level name to its number; unknown or empty names mean WARNING."""
    numeric = logging.getLevelName(level.upper()) if level else logging.WARNING
    return numeric if isinstance(numeric, int) else logging.WARNING
