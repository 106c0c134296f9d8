# src/astro_scheduler/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the scheduler core.

The facade and commands depend on Protocols instead of concrete classes.
This keeps the store/observers swappable and makes testing easier.
"""

from typing import Any, Protocol


class TaskObserver(Protocol):
    """Receives schedule change notifications synchronously, in subscription order."""

    def on_task_added(self, task: Any) -> None: ...
    def on_task_removed(self, task: Any) -> None: ...
    def on_task_updated(self, old_task: Any, new_task: Any) -> None: ...


class Command(Protocol):
    """A reversible mutation: execute() applies it, undo() applies the exact inverse."""

    def execute(self) -> None: ...
    def undo(self) -> None: ...


class TaskRepo(Protocol):
    # Mutations (each publishes one event after the change is committed)
    def add(self, task: Any, *, position: int | None = None) -> None: ...
    def remove(self, task: Any) -> None: ...
    def replace(self, old: Any, new: Any) -> None: ...

    # Reads
    def get(self, task_id: str) -> Any | None: ...
    def index_of(self, task: Any) -> int | None: ...
    def list_tasks(self) -> tuple[Any, ...]: ...
    def count_tasks(self) -> int: ...
