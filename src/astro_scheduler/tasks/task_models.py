# src/astro_scheduler/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import time
from enum import StrEnum


class Priority(StrEnum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class ChangeType(StrEnum):
    ADDED = "added"
    REMOVED = "removed"
    UPDATED = "updated"


def new_task_id() -> str:
    return str(uuid.uuid4())


@dataclass(slots=True, frozen=True)
class Task:
    """
    One scheduled activity.

    Notes:
    - immutable; rescheduling builds a new Task that keeps the same id
    - the interval is half-open: [start_time, end_time)
    - build through TaskBuilder / create_task, which validate the fields
    """

    description: str
    start_time: time
    end_time: time
    priority: Priority
    id: str = field(default_factory=new_task_id)


@dataclass(slots=True, frozen=True)
class TaskAdded:
    task: Task

    @property
    def change_type(self) -> ChangeType:
        return ChangeType.ADDED


@dataclass(slots=True, frozen=True)
class TaskRemoved:
    task: Task

    @property
    def change_type(self) -> ChangeType:
        return ChangeType.REMOVED


@dataclass(slots=True, frozen=True)
class TaskUpdated:
    old: Task
    new: Task

    @property
    def change_type(self) -> ChangeType:
        return ChangeType.UPDATED


TaskEvent = TaskAdded | TaskRemoved | TaskUpdated
