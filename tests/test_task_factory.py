# tests/test_task_factory.py

from __future__ import annotations

from datetime import time

import pytest

from astro_scheduler.tasks.errors import ParseError
from astro_scheduler.tasks.task_factory import (
    TaskBuilder,
    create_task,
    format_time,
    parse_priority,
    parse_time,
    with_interval,
)
from astro_scheduler.tasks.task_models import Priority


def test_create_task_parses_fields() -> None:
    task = create_task("  Morning Exercise ", "07:00", "08:00", "High")

    assert task.description == "Morning Exercise"
    assert task.start_time == time(7, 0)
    assert task.end_time == time(8, 0)
    assert task.priority is Priority.HIGH
    assert task.id


def test_ids_are_unique() -> None:
    a = create_task("A", "07:00", "08:00", "low")
    b = create_task("A", "07:00", "08:00", "low")
    assert a.id != b.id


@pytest.mark.parametrize(
    "raw", ["25:00", "26:00", "7am", "", "12:60", "24:00", "7:5", "9:00", "07:5", "0009:00"]
)
def test_parse_time_rejects_malformed(raw: str) -> None:
    with pytest.raises(ParseError):
        parse_time(raw)


def test_parse_time_accepts_seconds() -> None:
    assert parse_time("09:15:30") == time(9, 15, 30)
    assert format_time(time(9, 15, 30)) == "09:15:30"
    assert format_time(time(9, 15)) == "09:15"


def test_parse_priority_is_case_insensitive() -> None:
    assert parse_priority("LOW") is Priority.LOW
    assert parse_priority(" medium ") is Priority.MEDIUM
    with pytest.raises(ParseError):
        parse_priority("urgent")


def test_builder_rejects_inverted_or_empty_interval() -> None:
    with pytest.raises(ParseError):
        create_task("Backwards", "10:00", "09:00", "Low")
    with pytest.raises(ParseError):
        create_task("Zero length", "10:00", "10:00", "Low")


def test_builder_requires_description_and_fields() -> None:
    with pytest.raises(ParseError):
        create_task("   ", "07:00", "08:00", "High")
    with pytest.raises(ParseError):
        TaskBuilder().description("x").build()


def test_task_is_immutable() -> None:
    task = create_task("A", "07:00", "08:00", "low")
    with pytest.raises(AttributeError):
        task.description = "B"  # type: ignore[misc]


def test_with_interval_keeps_identity_fields() -> None:
    task = create_task("A", "07:00", "08:00", "low")
    moved = with_interval(task, time(8), time(9))

    assert moved.id == task.id
    assert moved.priority is task.priority
    assert moved.start_time == time(8)
