"""
Tests for mapping backend tasks onto Gantt events
"""

import pytest
from datetime import date, datetime, timedelta
from src.models.event import EventType, Priority
from src.models.task import Task
from src.services.event_mapper import (
    effective_deadline,
    event_start,
    events_for_day,
    infer_priority,
    infer_type,
    map_tasks_to_events,
    remaining_work_days,
    task_to_event,
)

TODAY = date(2024, 11, 15)


@pytest.mark.parametrize("fields,expected", [
    ({"completion_pct": 100, "deadline": "2024-11-01"}, Priority.LOW),
    ({"duration_days": 12}, Priority.MEDIUM),
    ({"duration_days": 5}, Priority.LOW),
    ({"completion_pct": 50, "deadline": "2024-11-10"}, Priority.HIGH),
    ({"deadline": "2024-11-25"}, Priority.LOW),
    ({"duration_days": 2, "deadline": "2024-11-18"}, Priority.MEDIUM),
    ({"duration_days": 2, "completion_pct": 50, "deadline": "2024-11-20"}, Priority.LOW),
    ({"duration_days": 3, "start_date": "2024-11-14"}, Priority.MEDIUM),
])
def test_infer_priority(fields, expected):
    assert infer_priority(Task(number=1, **fields), TODAY) == expected


def test_remaining_work_days():
    assert remaining_work_days(Task(duration_days=5, completion_pct=50)) == 3
    assert remaining_work_days(Task(duration_days=5, completion_pct=100)) == 0


def test_effective_deadline():
    assert effective_deadline(Task(deadline="2024-11-20")) == datetime(2024, 11, 20)
    assert effective_deadline(Task(start_date="2024-11-14 15:00", duration_days=3)) == datetime(2024, 11, 16)
    assert effective_deadline(Task()) is None


def test_infer_type():
    assert infer_type(Task(deadline="2024-11-20")) == EventType.DEADLINE
    assert infer_type(Task(start_date="2024-11-14", deadline="2024-11-20")) == EventType.OTHER
    assert infer_type(Task()) == EventType.OTHER


def test_event_start(now):
    assert event_start(Task(start_date="2024-11-14"), now) == datetime(2024, 11, 14)
    assert event_start(Task(deadline="2024-11-20", duration_days=3), now) == datetime(2024, 11, 18)
    assert event_start(Task(), now) == now


def test_task_to_event(now):
    task = Task(number=3, file_id="f1", project_name="Alpha", start_date="2024-11-14T09:30:00",
                duration_days=2, completion_pct=50)
    event = task_to_event(task, now)
    assert event.id == "task-f1-3"
    assert event.title == "Tarefa: 3 | Projeto: Alpha"
    assert event.time == "09:30"
    assert event.duration == 2
    assert event.progress == 50
    assert event.is_backend_task is True


def test_task_to_event_without_file(now):
    event = task_to_event(Task(number=8), now)
    assert event.id == "task-x-8"
    assert event.title == "Tarefa: 8 | Projeto: Projeto"
    assert event.date == now
    assert event.is_backend_task is False


def test_map_and_filter_by_day(sheet_tasks, now):
    events = map_tasks_to_events(sheet_tasks, now)
    assert [e.num for e in events] == [1, 2, 3, 4]
    assert [e.num for e in events_for_day(events, date(2024, 11, 4))] == [2]
    assert [e.num for e in events_for_day(events, now.date())] == [3]


def test_task_to_event_with_huge_duration(now):
    """Absurd durations never push the start out of the calendar"""
    event = task_to_event(Task(num=1, deadline="2024-11-10", duration="99999999"), now)
    assert event.duration == 3650
    assert event.date == datetime(2024, 11, 10) - timedelta(days=3649)


def test_task_near_calendar_end(now):
    task = Task(number=2, start_date="9999-12-30", duration_days=3650)
    assert effective_deadline(task) == datetime.max
    assert task_to_event(task, now).priority == Priority.LOW
