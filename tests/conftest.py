# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from astro_scheduler.cli.bootstrap import create_initial_state
from astro_scheduler.core.state import AppState
from astro_scheduler.tasks.notifier import ChangeNotifier
from astro_scheduler.tasks.scheduler import SchedulerFacade
from astro_scheduler.tasks.task_store import TaskStore

from .fakes import RecordingObserver

FIXED_DAY = date(2024, 3, 1)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="astro-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        console_enabled=False,
        demo_on_start=False,
        undo_depth=0,
        log_observer=True,
    )


@pytest.fixture()
def recorder() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture()
def store(recorder: RecordingObserver) -> TaskStore:
    notifier = ChangeNotifier()
    notifier.subscribe(recorder)
    return TaskStore(notifier)


@pytest.fixture()
def scheduler(store: TaskStore) -> SchedulerFacade:
    return SchedulerFacade(store, today=lambda: FIXED_DAY)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings, today=lambda: FIXED_DAY)
