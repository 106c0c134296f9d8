# src/astro_scheduler/tasks/notifier.py

from __future__ import annotations

import logging

from ..core.ports import TaskObserver
from .errors import ObserverError
from .task_models import Task, TaskAdded, TaskEvent, TaskRemoved, TaskUpdated

logger = logging.getLogger(__name__)


class ChangeNotifier:
    """
    Synchronous observer fan-out.

    - observers are matched by identity (subscribing twice is a no-op)
    - dispatch order == subscription order
    - a failing observer is logged and reported, the rest still run
    """

    def __init__(self) -> None:
        self._observers: list[TaskObserver] = []

    def subscribe(self, observer: TaskObserver) -> None:
        if any(o is observer for o in self._observers):
            return
        self._observers.append(observer)
        logger.debug("Observer subscribed: %r", observer)

    def unsubscribe(self, observer: TaskObserver) -> None:
        self._observers = [o for o in self._observers if o is not observer]

    @property
    def observers(self) -> tuple[TaskObserver, ...]:
        return tuple(self._observers)

    def publish(self, event: TaskEvent) -> list[ObserverError]:
        """
        Deliver `event` to every current observer.

        Returns the failures (one ObserverError per failing observer); the
        caller's mutation is already committed and is never rolled back.
        """
        errors: list[ObserverError] = []

        # Snapshot: observers may (un)subscribe from inside a callback.
        for observer in list(self._observers):
            try:
                _dispatch(observer, event)
            except Exception as exc:
                err = ObserverError(observer, event)
                err.__cause__ = exc
                logger.exception(
                    "Observer %r failed on %s", observer, event.change_type.value
                )
                errors.append(err)

        return errors


def _dispatch(observer: TaskObserver, event: TaskEvent) -> None:
    if isinstance(event, TaskAdded):
        observer.on_task_added(event.task)
    elif isinstance(event, TaskRemoved):
        observer.on_task_removed(event.task)
    elif isinstance(event, TaskUpdated):
        observer.on_task_updated(event.old, event.new)
    else:
        raise TypeError(f"Unknown event type: {type(event).__name__}")


class LoggingTaskObserver:
    """Default observer: writes every schedule change to the log."""

    def on_task_added(self, task: Task) -> None:
        logger.info("New task added: %s", task.description)

    def on_task_removed(self, task: Task) -> None:
        logger.info("Task removed: %s", task.description)

    def on_task_updated(self, old_task: Task, new_task: Task) -> None:
        logger.info("Task updated from: %s to: %s", old_task.description, new_task.description)
