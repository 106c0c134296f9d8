# tests/test_notifier.py

from __future__ import annotations

import logging

from astro_scheduler.tasks.errors import ObserverError
from astro_scheduler.tasks.notifier import ChangeNotifier, LoggingTaskObserver
from astro_scheduler.tasks.task_factory import create_task
from astro_scheduler.tasks.task_models import ChangeType, TaskAdded, TaskRemoved, TaskUpdated

from .fakes import ExplodingObserver, RecordingObserver


def test_publish_in_subscription_order() -> None:
    notifier = ChangeNotifier()
    order: list[str] = []

    class Named(RecordingObserver):
        def __init__(self, name: str) -> None:
            super().__init__()
            self.name = name

        def on_task_added(self, task) -> None:
            order.append(self.name)

    first, second = Named("first"), Named("second")
    notifier.subscribe(first)
    notifier.subscribe(second)
    notifier.subscribe(first)  # already subscribed: no-op

    notifier.publish(TaskAdded(create_task("A", "07:00", "08:00", "low")))
    assert order == ["first", "second"]


def test_failing_observer_does_not_stop_the_rest(caplog) -> None:
    notifier = ChangeNotifier()
    bad = ExplodingObserver()
    good = RecordingObserver()
    notifier.subscribe(bad)
    notifier.subscribe(good)

    task = create_task("A", "07:00", "08:00", "low")
    with caplog.at_level(logging.ERROR, logger="astro_scheduler.tasks.notifier"):
        errors = notifier.publish(TaskRemoved(task))

    assert good.events == [("removed", task)]
    assert len(errors) == 1
    assert isinstance(errors[0], ObserverError)
    assert errors[0].observer is bad
    assert isinstance(errors[0].__cause__, RuntimeError)
    assert "failed on removed" in caplog.text


def test_unsubscribe_by_identity() -> None:
    notifier = ChangeNotifier()
    a, b = RecordingObserver(), RecordingObserver()
    notifier.subscribe(a)
    notifier.subscribe(b)

    # a == b (equal dataclasses), but only `a` itself must go away.
    notifier.unsubscribe(a)
    assert notifier.observers == (b,)


def test_updated_event_and_logging_observer(caplog) -> None:
    notifier = ChangeNotifier()
    rec = RecordingObserver()
    notifier.subscribe(rec)
    notifier.subscribe(LoggingTaskObserver())

    old = create_task("Old", "07:00", "08:00", "low")
    new = create_task("New", "08:00", "09:00", "low")
    event = TaskUpdated(old, new)
    assert event.change_type is ChangeType.UPDATED

    with caplog.at_level(logging.INFO, logger="astro_scheduler.tasks.notifier"):
        assert notifier.publish(event) == []

    assert rec.events == [("updated", (old, new))]
    assert "Task updated from: Old to: New" in caplog.text
