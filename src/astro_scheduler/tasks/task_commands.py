# src/astro_scheduler/tasks/task_commands.py

from __future__ import annotations

"""
Reversible schedule mutations and the undo log.

Each command walks a tiny state machine:

    CREATED --execute()--> EXECUTED --undo()--> UNDONE

Commands are pushed on the CommandLog only after execute() succeeded.
The log is a single linear undo chain: no redo, no branching history.
"""

import logging
from collections import deque
from enum import StrEnum

from ..core.ports import Command, TaskRepo
from .errors import SchedulerError
from .task_models import Task

logger = logging.getLogger(__name__)


class CommandState(StrEnum):
    CREATED = "created"
    EXECUTED = "executed"
    UNDONE = "undone"


class _TaskCommand:
    name = "command"

    def __init__(self, store: TaskRepo) -> None:
        self.store = store
        self.state = CommandState.CREATED

    def execute(self) -> None:
        if self.state != CommandState.CREATED:
            raise SchedulerError(f"{self.name}: cannot execute from state {self.state.value}")
        self._apply()
        self.state = CommandState.EXECUTED

    def undo(self) -> None:
        if self.state != CommandState.EXECUTED:
            raise SchedulerError(f"{self.name}: cannot undo from state {self.state.value}")
        self._revert()
        self.state = CommandState.UNDONE

    def _apply(self) -> None:
        raise NotImplementedError

    def _revert(self) -> None:
        raise NotImplementedError


class AddTaskCommand(_TaskCommand):
    name = "add"

    def __init__(self, store: TaskRepo, task: Task) -> None:
        super().__init__(store)
        self.task = task

    def _apply(self) -> None:
        self.store.add(self.task)

    def _revert(self) -> None:
        self.store.remove(self.task)

    def __repr__(self) -> str:
        return f"AddTaskCommand({self.task.description!r}, state={self.state.value})"


class RemoveTaskCommand(_TaskCommand):
    name = "remove"

    def __init__(self, store: TaskRepo, task: Task) -> None:
        super().__init__(store)
        self.task = task
        self._position: int | None = None

    def _apply(self) -> None:
        self._position = self.store.index_of(self.task)
        self.store.remove(self.task)

    def _revert(self) -> None:
        # Put it back where it was so the listing looks the same as before.
        self.store.add(self.task, position=self._position)

    def __repr__(self) -> str:
        return f"RemoveTaskCommand({self.task.description!r}, state={self.state.value})"


class RescheduleTaskCommand(_TaskCommand):
    name = "reschedule"

    def __init__(self, store: TaskRepo, old: Task, new: Task) -> None:
        super().__init__(store)
        self.old = old
        self.new = new

    def _apply(self) -> None:
        self.store.replace(self.old, self.new)

    def _revert(self) -> None:
        self.store.replace(self.new, self.old)

    def __repr__(self) -> str:
        return f"RescheduleTaskCommand({self.old.description!r}, state={self.state.value})"


class CommandLog:
    """
    LIFO history of executed commands.

    max_depth > 0 keeps only the newest `max_depth` entries (oldest are dropped).
    """

    def __init__(self, max_depth: int = 0) -> None:
        self.max_depth = max(0, int(max_depth))
        self._stack: deque[Command] = deque(maxlen=self.max_depth or None)

    def push(self, command: Command) -> None:
        state = getattr(command, "state", CommandState.EXECUTED)
        if state != CommandState.EXECUTED:
            raise SchedulerError("Only executed commands can be pushed on the undo log")
        self._stack.append(command)

    def pop_and_undo(self) -> Command | None:
        """Undo the newest command; empty log -> None (not an error)."""
        if not self._stack:
            logger.debug("Undo requested on an empty log")
            return None
        command = self._stack.pop()
        try:
            command.undo()
        except Exception:
            self._stack.append(command)
            raise
        return command

    def peek(self) -> Command | None:
        return self._stack[-1] if self._stack else None

    def clear(self) -> None:
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)
