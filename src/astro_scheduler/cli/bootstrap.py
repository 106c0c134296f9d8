# src/astro_scheduler/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires notifier / store / command log / facade into AppState,
- replays the scripted demo day on request.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..config import get_settings
from ..core.state import AppState
from ..tasks.errors import SchedulerError
from ..tasks.notifier import ChangeNotifier, LoggingTaskObserver
from ..tasks.scheduler import SchedulerFacade
from ..tasks.task_commands import CommandLog
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, today: Callable[[], date] = date.today) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    `today` supplies the date shown in the schedule table.
    """
    if settings is None:
        settings = get_settings()

    notifier = ChangeNotifier()
    if getattr(settings, "log_observer", True):
        notifier.subscribe(LoggingTaskObserver())

    store = TaskStore(notifier)
    command_log = CommandLog(max_depth=int(getattr(settings, "undo_depth", 0) or 0))

    return AppState(
        settings=settings,
        notifier=notifier,
        store=store,
        scheduler=SchedulerFacade(store, command_log, today=today),
    )


def run_demo(state: AppState, emit: Callable[[str], None] = print) -> None:
    """
    Replay the reference day: two adds, a removal, a lunch break, then the
    three rejected cases (conflict, invalid time, unknown task).

    Failures are reported through `emit`; none of them stops the script.
    """
    scheduler = state.scheduler

    def attempt(action: Callable[[], object]) -> None:
        try:
            action()
        except SchedulerError as err:
            emit(f"Error: {err}")

    def show(title: str) -> None:
        emit(title)
        for line in scheduler.list_schedule():
            emit(line)

    attempt(lambda: scheduler.add_task("Morning Exercise", "07:00", "08:00", "High"))
    attempt(lambda: scheduler.add_task("Team Meeting", "09:00", "10:00", "Medium"))
    show("Schedule Initial:")

    attempt(lambda: scheduler.remove_task("Morning Exercise"))
    show("Schedule after task removal:")

    attempt(lambda: scheduler.add_task("Lunch Break", "12:00", "13:00", "LOW"))
    show("Schedule after task added:")

    attempt(lambda: scheduler.add_task("Training Session", "09:30", "10:30", "High"))
    attempt(lambda: scheduler.add_task("Invalid Time Task", "25:00", "26:00", "Low"))
    attempt(lambda: scheduler.remove_task("Non-existent Task"))

    show("Final schedule:")
    logger.info("Demo finished: %d task(s) scheduled", state.store.count_tasks())
