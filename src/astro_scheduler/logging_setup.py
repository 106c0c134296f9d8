# src/astro_scheduler/logging_setup.py

"""
Logging for the scheduler console.

The console already prints every schedule change and every rejection as a
command reply ("Added: ...", "Error: Task conflicts ..."). Logging those
same events to stderr would show each of them twice, so:
- console: echoed scheduler chatter is dropped, everything else is filtered by level
- file (<data_dir>/<app_name>.log): the full audit trail, DEBUG and up
"""

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path

PACKAGE = "astro_scheduler"

# Loggers whose INFO/WARNING records duplicate a console reply.
ECHOED_LOGGERS = (
    f"{PACKAGE}.tasks.notifier",
    f"{PACKAGE}.tasks.scheduler",
)


class _ConsoleEchoFilter(logging.Filter):
    """
    - schedule changes (notifier) and accepted/rejected operations (facade)
      reach the console only at ERROR+ (e.g. a crashing observer)
    - other astro_scheduler records pass
    - third-party records and 'py.warnings' only at ERROR+
    """

    def __init__(self, echoed: tuple[str, ...] = ECHOED_LOGGERS) -> None:
        super().__init__()
        self._echoed = echoed

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name in self._echoed:
            return record.levelno >= logging.ERROR

        if name == PACKAGE or name.startswith(PACKAGE + "."):
            return True

        return record.levelno >= logging.ERROR


def log_file_name(app_name: str) -> str:
    """'Astro Scheduler' -> 'astro-scheduler.log'; falls back to 'astro.log'."""
    slug = re.sub(r"[^a-z0-9]+", "-", (app_name or "").lower()).strip("-")
    return f"{slug or 'astro'}.log"


def setup_logging(
    *,
    log_dir: str | Path,
    app_name: str = "astro-scheduler",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    quiet_echoed: bool = True,
) -> Path:
    """
    Install the console + file handlers on the root logger and return the log file path.

    quiet_echoed=False keeps scheduler events on the console too (handy with
    ASTRO_LOG_LEVEL=DEBUG when there is no REPL echoing them).
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / log_file_name(app_name)

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    console.addFilter(_ConsoleEchoFilter(ECHOED_LOGGERS if quiet_echoed else ()))
    root.addHandler(console)

    # File keeps the timestamped trail of every add/remove/undo.
    audit = logging.FileHandler(str(log_file), encoding="utf-8")
    audit.setLevel(file_level)
    audit.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(audit)

    logging.captureWarnings(True)
    return log_file
