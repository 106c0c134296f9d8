# src/astro_scheduler/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, optionally replays the demo day,
then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, run_demo
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    console_level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(console_level, int):
        console_level = logging.INFO

    log_file = setup_logging(
        log_dir=settings.data_dir,
        app_name=settings.app_name,
        console_level=console_level,
        quiet_echoed=settings.console_enabled or settings.demo_on_start,
    )

    logger.info("Starting %s (log file: %s)...", settings.app_name, log_file)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    if settings.demo_on_start:
        run_demo(state)

    if settings.console_enabled:
        run_console_loop(state)
    else:
        logger.info("Console disabled; nothing else to run.")

    logger.info("Bye. %d task(s) in schedule.", state.store.count_tasks())


if __name__ == "__main__":
    main()
