# src/astro_scheduler/tasks/scheduler.py

from __future__ import annotations

"""
Scheduler facade.

The single public entry point over the task subsystem:
- parses/validates user text (TaskBuilder)
- rejects overlapping intervals (conflicts.find_conflicts)
- runs every mutation as a command and records it for undo
- renders the current schedule as a fixed-width table

All check-then-act sequences run under the store lock, so a conflict check
and the insert that follows it are atomic with respect to other callers.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from datetime import date

from ..core.ports import Command
from .conflicts import find_conflicts
from .errors import ConflictError, NotFoundError, ParseError
from .task_commands import AddTaskCommand, CommandLog, RemoveTaskCommand, RescheduleTaskCommand
from .task_factory import create_task, format_time, parse_time, with_interval
from .task_models import Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)

ROW_FORMAT = "%-12s %-12s %-12s %-30s %-10s"
HEADER = ROW_FORMAT % ("Date", "StartTime", "EndTime", "Description", "Priority")
SEPARATOR = "-" * 93
EMPTY_MESSAGE = "No tasks scheduled."


def format_schedule(tasks: Iterable[Task], today: date) -> Iterator[str]:
    """Yield table lines for `tasks`; a single EMPTY_MESSAGE line if there are none."""
    rows = list(tasks)
    if not rows:
        yield EMPTY_MESSAGE
        return

    yield HEADER
    yield SEPARATOR
    day = today.isoformat()
    for task in rows:
        yield ROW_FORMAT % (
            day,
            format_time(task.start_time),
            format_time(task.end_time),
            task.description,
            task.priority.value,
        )


class ScheduleView:
    """
    Lazy, restartable view of the schedule.

    Nothing is read until iteration starts; every new iteration takes a fresh
    snapshot of the store, so the view always reflects the current state.
    """

    def __init__(self, store: TaskStore, today: Callable[[], date]) -> None:
        self._store = store
        self._today = today

    def __iter__(self) -> Iterator[str]:
        return format_schedule(self._store.list_tasks(), self._today())

    def render(self) -> str:
        return "\n".join(self)


class SchedulerFacade:
    def __init__(
        self,
        store: TaskStore,
        command_log: CommandLog | None = None,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.store = store
        self.command_log = command_log if command_log is not None else CommandLog()
        self._today = today

    # ---- commands ----

    def add_task(
        self,
        description: str,
        start_text: str,
        end_text: str,
        priority_text: str,
    ) -> Task:
        try:
            task = create_task(description, start_text, end_text, priority_text)
        except ParseError:
            logger.warning(
                "Rejected task %r: invalid input (start=%r end=%r priority=%r)",
                description,
                start_text,
                end_text,
                priority_text,
            )
            raise

        with self.store.lock:
            conflicts = find_conflicts(task, self.store.list_tasks())
            if conflicts:
                logger.warning(
                    "Rejected task %r: conflicts with %s",
                    task.description,
                    ", ".join(t.description for t in conflicts),
                )
                raise ConflictError(task, conflicts)

            self._run(AddTaskCommand(self.store, task))

        logger.info("Task added successfully: %s", task.description)
        return task

    def remove_task(self, description: str) -> Task:
        with self.store.lock:
            task = self._find_by_description(description)
            self._run(RemoveTaskCommand(self.store, task))

        logger.info("Task removed successfully: %s", task.description)
        return task

    def reschedule_task(self, description: str, start_text: str, end_text: str) -> Task:
        with self.store.lock:
            old = self._find_by_description(description)
            try:
                new = with_interval(old, parse_time(start_text), parse_time(end_text))
            except ParseError:
                logger.warning(
                    "Rejected reschedule of %r: invalid input (start=%r end=%r)",
                    old.description,
                    start_text,
                    end_text,
                )
                raise

            conflicts = find_conflicts(new, self.store.list_tasks(), ignore_id=old.id)
            if conflicts:
                logger.warning(
                    "Rejected reschedule of %r: conflicts with %s",
                    old.description,
                    ", ".join(t.description for t in conflicts),
                )
                raise ConflictError(new, conflicts)

            self._run(RescheduleTaskCommand(self.store, old, new))

        logger.info(
            "Task rescheduled: %s %s-%s",
            new.description,
            format_time(new.start_time),
            format_time(new.end_time),
        )
        return new

    def undo(self) -> Command | None:
        with self.store.lock:
            command = self.command_log.pop_and_undo()

        if command is None:
            logger.info("Nothing to undo")
        else:
            logger.info("Undone last command: %r", command)
        return command

    # ---- reads ----

    def tasks(self) -> tuple[Task, ...]:
        return self.store.list_tasks()

    def list_schedule(self, today: date | None = None) -> ScheduleView:
        if today is not None:
            return ScheduleView(self.store, lambda: today)
        return ScheduleView(self.store, self._today)

    # ---- helpers ----

    def _run(self, command: AddTaskCommand | RemoveTaskCommand | RescheduleTaskCommand) -> None:
        command.execute()
        self.command_log.push(command)

    def _find_by_description(self, description: str) -> Task:
        needle = (description or "").strip().casefold()
        for task in self.store.list_tasks():
            if task.description.casefold() == needle:
                return task

        logger.warning("Task not found: %s", description)
        raise NotFoundError(f"Task not found - {description}")
