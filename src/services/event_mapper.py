"""
Mapping of backend employee tasks onto Gantt events
"""

import math
from datetime import date, datetime
from typing import Iterable, List, Optional
from src.config.constants import (
    PRIORITY_COMFORT_DAYS,
    PRIORITY_REMAINING_WORK_DAYS,
    PRIORITY_SLACK_DAYS,
)
from src.models.event import Event, EventType, Priority
from src.models.task import Task
from src.utils.date_utils import days_between, get_current_datetime, shift_datetime, start_of_day


def infer_type(task: Task) -> EventType:
    """Task with only a deadline is drawn as a deadline"""
    if task.start_date is None and task.deadline is not None:
        return EventType.DEADLINE
    return EventType.OTHER


def remaining_work_days(task: Task) -> int:
    """Days of work left given duration and completion"""
    return max(0, math.ceil(task.duration_days * (1 - task.completion_pct / 100)))


def effective_deadline(task: Task) -> Optional[datetime]:
    """Declared deadline, or start + duration - 1 (inclusive)"""
    if task.deadline is not None:
        return task.deadline
    if task.start_date is not None:
        return shift_datetime(start_of_day(task.start_date), max(1, task.duration_days) - 1)
    return None


def infer_priority(task: Task, today: Optional[date] = None) -> Priority:
    """
    Priority from the slack between deadline and remaining work

    Finished tasks are low; a passed deadline is high; a deadline a week
    or more away is low; otherwise two days of slack or less is medium.
    Without any deadline, ten or more remaining work days is medium.

    Args:
        task: Backend task
        today: Reference day (defaults to today)

    Returns:
        Priority
    """
    if task.completion_pct >= 100:
        return Priority.LOW

    remaining = remaining_work_days(task)
    deadline = effective_deadline(task)

    if deadline is None:
        return Priority.MEDIUM if remaining >= PRIORITY_REMAINING_WORK_DAYS else Priority.LOW

    today = today or get_current_datetime().date()
    days_to_deadline = days_between(today, deadline)
    slack = days_to_deadline - remaining

    if days_to_deadline < 0:
        return Priority.HIGH
    if days_to_deadline >= PRIORITY_COMFORT_DAYS:
        return Priority.LOW
    if slack <= PRIORITY_SLACK_DAYS:
        return Priority.MEDIUM
    return Priority.LOW


def project_label(task: Task) -> str:
    return task.project_name or task.file_id or "Projeto"


def event_start(task: Task, now: Optional[datetime] = None) -> datetime:
    """
    Start of the bar: start date, else deadline - duration + 1, else now
    """
    if task.start_date is not None:
        return task.start_date
    if task.deadline is not None:
        return shift_datetime(task.deadline, 1 - max(1, task.duration_days))
    return now or get_current_datetime()


def task_to_event(task: Task, now: Optional[datetime] = None) -> Event:
    """
    Convert one backend task to a Gantt event

    Args:
        task: Backend task
        now: Reference time used when the task has no dates

    Returns:
        Event
    """
    start = event_start(task, now)
    today = (now or get_current_datetime()).date()
    return Event(
        id=f"task-{task.file_id or 'x'}-{task.number}",
        title=f"Tarefa: {task.number} | Projeto: {project_label(task)}",
        date=start,
        deadline=task.deadline,
        time=start.strftime("%H:%M"),
        type=infer_type(task),
        duration=task.duration_days,
        progress=task.completion_pct,
        priority=infer_priority(task, today),
        file_id=task.file_id,
        num=task.number,
    )


def map_tasks_to_events(tasks: Iterable[Task], now: Optional[datetime] = None) -> List[Event]:
    """Convert backend tasks to events, keeping order"""
    return [task_to_event(task, now) for task in tasks]


def events_for_day(events: Iterable[Event], day: date) -> List[Event]:
    """Events starting on the given calendar day"""
    return [event for event in events if event.date.date() == day]
