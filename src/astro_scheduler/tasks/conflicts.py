# src/astro_scheduler/tasks/conflicts.py

"""Time-interval conflict checks between a candidate task and the stored ones."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import time

from .task_models import Task


def intervals_overlap(start_a: time, end_a: time, start_b: time, end_b: time) -> bool:
    """
    Half-open overlap: [a) and [b) conflict iff each starts before the other ends.

    Touching boundaries (one ends exactly when the other starts) are NOT a conflict.
    """
    return start_a < end_b and start_b < end_a


def find_conflicts(
    candidate: Task,
    existing: Iterable[Task],
    *,
    ignore_id: str | None = None,
) -> list[Task]:
    """Return the existing tasks that overlap `candidate` (linear scan)."""
    return [
        task
        for task in existing
        if task.id != ignore_id
        and intervals_overlap(candidate.start_time, candidate.end_time, task.start_time, task.end_time)
    ]


def has_conflict(
    candidate: Task,
    existing: Iterable[Task],
    *,
    ignore_id: str | None = None,
) -> bool:
    return any(
        task.id != ignore_id
        and intervals_overlap(candidate.start_time, candidate.end_time, task.start_time, task.end_time)
        for task in existing
    )
