# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from astro_scheduler.tasks.task_models import Task


@dataclass
class RecordingObserver:
    """
    Observer that captures every notification for assertions.

    events: list of (kind, payload) tuples in delivery order.
    """

    events: list[tuple[str, object]] = field(default_factory=list)

    def on_task_added(self, task: Task) -> None:
        self.events.append(("added", task))

    def on_task_removed(self, task: Task) -> None:
        self.events.append(("removed", task))

    def on_task_updated(self, old_task: Task, new_task: Task) -> None:
        self.events.append(("updated", (old_task, new_task)))

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.events]


class ExplodingObserver:
    """Fails on every callback."""

    def __init__(self) -> None:
        self.calls = 0

    def _boom(self, *args) -> None:
        self.calls += 1
        raise RuntimeError("observer exploded")

    on_task_added = _boom
    on_task_removed = _boom
    on_task_updated = _boom
