# src/astro_scheduler/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator

from .errors import DuplicateIdError, NotFoundError
from .notifier import ChangeNotifier
from .task_models import Task, TaskAdded, TaskRemoved, TaskUpdated

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store (task id -> Task).

    Ordering:
    - iteration / list_tasks() follow insertion order
    - replace() keeps the task at its current position

    Thread-safety:
    - every method runs under `lock` (an RLock)
    - callers that need check-then-act (conflict check + insert) hold `lock`
      across both steps; the facade does this
    """

    def __init__(self, notifier: ChangeNotifier | None = None) -> None:
        self._tasks: dict[str, Task] = {}
        self.notifier = notifier if notifier is not None else ChangeNotifier()
        self.lock = threading.RLock()
        logger.debug("TaskStore ready (in-memory)")

    # ---- mutations ----

    def add(self, task: Task, *, position: int | None = None) -> None:
        """
        Insert `task`; duplicate ids are rejected, never overwritten.

        `position` re-inserts at a given display index (used by undo of a removal).
        """
        with self.lock:
            if task.id in self._tasks:
                raise DuplicateIdError(f"Task id already stored: {task.id}")
            if position is None or position >= len(self._tasks):
                self._tasks[task.id] = task
            else:
                items = list(self._tasks.items())
                items.insert(max(0, position), (task.id, task))
                self._tasks = dict(items)
            logger.debug("Task stored id=%s description=%s", task.id, task.description)
            self.notifier.publish(TaskAdded(task))

    def remove(self, task: Task) -> None:
        with self.lock:
            if self._tasks.pop(task.id, None) is None:
                raise NotFoundError(f"Task not found: {task.description}")
            logger.debug("Task dropped id=%s description=%s", task.id, task.description)
            self.notifier.publish(TaskRemoved(task))

    def replace(self, old: Task, new: Task) -> None:
        if old.id != new.id:
            raise ValueError("replace() requires both tasks to share an id")

        with self.lock:
            if old.id not in self._tasks:
                raise NotFoundError(f"Task not found: {old.description}")
            self._tasks[old.id] = new
            logger.debug("Task replaced id=%s", old.id)
            self.notifier.publish(TaskUpdated(old, new))

    # ---- reads ----

    def get(self, task_id: str) -> Task | None:
        with self.lock:
            return self._tasks.get(task_id)

    def index_of(self, task: Task) -> int | None:
        with self.lock:
            for i, task_id in enumerate(self._tasks):
                if task_id == task.id:
                    return i
            return None

    def list_tasks(self) -> tuple[Task, ...]:
        with self.lock:
            return tuple(self._tasks.values())

    def count_tasks(self) -> int:
        with self.lock:
            return len(self._tasks)

    def __len__(self) -> int:
        return self.count_tasks()

    def __iter__(self) -> Iterator[Task]:
        return iter(self.list_tasks())

    def __contains__(self, task: object) -> bool:
        task_id = getattr(task, "id", None)
        if task_id is None:
            return False
        with self.lock:
            return self._tasks.get(task_id) is task
