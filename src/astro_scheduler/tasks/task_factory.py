# src/astro_scheduler/tasks/task_factory.py

from __future__ import annotations

"""
Task construction.

All user-supplied text goes through here:
- "HH:MM" or "HH:MM:SS" time-of-day strings (24h clock, no "24:00")
- priority labels, case-insensitive (high / Medium / LOW)
- descriptions, trimmed and required to be non-empty

Everything that fails validation raises ParseError; nothing else in the
package needs to know about the accepted text formats.
"""

import re
from datetime import datetime, time

from .errors import ParseError
from .task_models import Priority, Task

_TIME_FORMATS = ("%H:%M", "%H:%M:%S")
# Two-digit fields only: "7:05" and "09:5" are rejected.
_TIME_RE = re.compile(r"[0-9]{2}:[0-9]{2}(:[0-9]{2})?")


def parse_time(raw: str) -> time:
    text = (raw or "").strip()
    if not text:
        raise ParseError("Invalid time format: empty value")
    if not _TIME_RE.fullmatch(text):
        raise ParseError(f"Invalid time format: {raw!r} (expected HH:MM)")

    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue

    raise ParseError(f"Invalid time format: {raw!r} (expected HH:MM)")


def parse_priority(raw: str) -> Priority:
    key = (raw or "").strip().upper()
    try:
        return Priority[key]
    except KeyError:
        allowed = ", ".join(p.value for p in Priority)
        raise ParseError(f"Unknown priority: {raw!r} (expected one of {allowed})") from None


def format_time(value: time) -> str:
    if value.second or value.microsecond:
        return value.strftime("%H:%M:%S")
    return value.strftime("%H:%M")


class TaskBuilder:
    """Fluent builder; build() validates and returns a fresh Task with a new id."""

    def __init__(self) -> None:
        self._description: str | None = None
        self._start_time: time | None = None
        self._end_time: time | None = None
        self._priority: Priority | None = None

    def description(self, value: str) -> TaskBuilder:
        self._description = value
        return self

    def start_time(self, value: time) -> TaskBuilder:
        self._start_time = value
        return self

    def end_time(self, value: time) -> TaskBuilder:
        self._end_time = value
        return self

    def priority(self, value: Priority) -> TaskBuilder:
        self._priority = value
        return self

    def build(self) -> Task:
        description = (self._description or "").strip()
        if not description:
            raise ParseError("description is required")
        if self._start_time is None or self._end_time is None:
            raise ParseError("start and end time are required")
        if self._priority is None:
            raise ParseError("priority is required")
        if self._start_time >= self._end_time:
            raise ParseError(
                f"start time {format_time(self._start_time)} must be before "
                f"end time {format_time(self._end_time)}"
            )

        return Task(
            description=description,
            start_time=self._start_time,
            end_time=self._end_time,
            priority=self._priority,
        )


def create_task(description: str, start_text: str, end_text: str, priority_text: str) -> Task:
    return (
        TaskBuilder()
        .description(description)
        .start_time(parse_time(start_text))
        .end_time(parse_time(end_text))
        .priority(parse_priority(priority_text))
        .build()
    )


def with_interval(task: Task, start: time, end: time) -> Task:
    """Copy of `task` moved to [start, end); keeps id, description and priority."""
    if start >= end:
        raise ParseError(
            f"start time {format_time(start)} must be before end time {format_time(end)}"
        )
    return Task(
        description=task.description,
        start_time=start,
        end_time=end,
        priority=task.priority,
        id=task.id,
    )
