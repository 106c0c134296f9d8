# src/astro_scheduler/tasks/errors.py

from __future__ import annotations

from typing import Any


class SchedulerError(Exception):
    """Base class for every failure the scheduler reports to its caller."""


class ParseError(SchedulerError, ValueError):
    """Malformed time text, unknown priority label, empty description or inverted interval."""


class ConflictError(SchedulerError):
    def __init__(self, candidate: Any, conflicts: list[Any]) -> None:
        self.candidate = candidate
        self.conflicts = list(conflicts)
        names = ", ".join(getattr(t, "description", "?") for t in self.conflicts)
        super().__init__(f"Task conflicts with existing task: {names}")


class NotFoundError(SchedulerError, LookupError):
    pass


class DuplicateIdError(SchedulerError):
    pass


class ObserverError(SchedulerError):
    """
    One observer failed while an event was being dispatched.

    The original exception is chained as __cause__.
    """

    def __init__(self, observer: Any, event: Any) -> None:
        self.observer = observer
        self.event = event
        super().__init__(f"Observer {observer!r} failed on {type(event).__name__}")
