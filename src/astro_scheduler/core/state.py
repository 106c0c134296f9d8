# src/astro_scheduler/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.notifier import ChangeNotifier
from ..tasks.scheduler import SchedulerFacade
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    notifier: ChangeNotifier
    store: TaskStore
    scheduler: SchedulerFacade

    @property
    def lock(self):
        return self.store.lock
