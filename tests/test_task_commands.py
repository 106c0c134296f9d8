# tests/test_task_commands.py

from __future__ import annotations

import pytest

from astro_scheduler.tasks.errors import SchedulerError
from astro_scheduler.tasks.task_commands import (
    AddTaskCommand,
    CommandLog,
    CommandState,
    RemoveTaskCommand,
)
from astro_scheduler.tasks.task_factory import create_task
from astro_scheduler.tasks.task_store import TaskStore


def test_add_command_state_machine(store: TaskStore) -> None:
    task = create_task("A", "07:00", "08:00", "high")
    cmd = AddTaskCommand(store, task)
    assert cmd.state is CommandState.CREATED

    with pytest.raises(SchedulerError):
        cmd.undo()

    cmd.execute()
    assert cmd.state is CommandState.EXECUTED
    assert store.get(task.id) is task

    with pytest.raises(SchedulerError):
        cmd.execute()

    cmd.undo()
    assert cmd.state is CommandState.UNDONE
    assert store.count_tasks() == 0


def test_remove_command_undo_restores_position(store: TaskStore) -> None:
    a = create_task("A", "07:00", "08:00", "high")
    b = create_task("B", "09:00", "10:00", "low")
    c = create_task("C", "11:00", "12:00", "low")
    for t in (a, b, c):
        store.add(t)

    cmd = RemoveTaskCommand(store, b)
    cmd.execute()
    assert store.list_tasks() == (a, c)

    cmd.undo()
    assert store.list_tasks() == (a, b, c)
    assert store.get(b.id) is b


def test_log_is_lifo_and_empty_undo_is_noop(store: TaskStore) -> None:
    log = CommandLog()
    assert log.pop_and_undo() is None

    first = AddTaskCommand(store, create_task("A", "07:00", "08:00", "high"))
    second = AddTaskCommand(store, create_task("B", "09:00", "10:00", "low"))
    for cmd in (first, second):
        cmd.execute()
        log.push(cmd)

    assert len(log) == 2
    assert log.peek() is second
    assert log.pop_and_undo() is second
    assert [t.description for t in store] == ["A"]
    assert log.pop_and_undo() is first
    assert log.pop_and_undo() is None


def test_push_requires_executed_command(store: TaskStore) -> None:
    log = CommandLog()
    with pytest.raises(SchedulerError):
        log.push(AddTaskCommand(store, create_task("A", "07:00", "08:00", "high")))


def test_max_depth_drops_oldest(store: TaskStore) -> None:
    log = CommandLog(max_depth=2)
    cmds = []
    for i, start in enumerate(("07:00", "08:00", "09:00")):
        end = f"{7 + i:02d}:30"
        cmd = AddTaskCommand(store, create_task(f"T{i}", start, end, "low"))
        cmd.execute()
        log.push(cmd)
        cmds.append(cmd)

    assert len(log) == 2
    log.pop_and_undo()
    log.pop_and_undo()
    assert log.pop_and_undo() is None
    assert [t.description for t in store] == ["T0"]
