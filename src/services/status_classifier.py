"""
Task status derivation
"""

from enum import Enum
from datetime import datetime
from typing import Any, Dict, Iterable, Optional
from src.models.task import Task, TaskProgress
from src.utils.date_utils import get_current_datetime
from src.utils.numbers import parse_int, to_float


class TaskStatus(str, Enum):
    """Display state of a task"""
    COMPLETED = "completed"
    OVERDUE = "overdue"
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"


# Labels of the status filter
STATUS_FILTER_LABELS: Dict[TaskStatus, str] = {
    TaskStatus.COMPLETED: "Concluídas",
    TaskStatus.OVERDUE: "Atrasadas",
    TaskStatus.NOT_STARTED: "Não iniciada",
    TaskStatus.IN_PROGRESS: "Em andamento",
}

# Labels of the status badge
STATUS_BADGE_LABELS: Dict[TaskStatus, str] = {
    TaskStatus.COMPLETED: "Concluída",
    TaskStatus.OVERDUE: "Atrasada",
    TaskStatus.NOT_STARTED: "Não iniciada",
    TaskStatus.IN_PROGRESS: "Em andamento",
}


def classify_status(completion_pct: Any, delay_days: Any = None, has_started: bool = False) -> TaskStatus:
    """
    Derive the display state of a task

    Completion is checked before delay: a task finished late shows as
    completed, not overdue.

    Args:
        completion_pct: Completion percentage (0..100)
        delay_days: Delay reported by the backend, in days
        has_started: Task has a start timestamp; does not affect the result

    Returns:
        TaskStatus
    """
    pct = to_float(completion_pct) or 0.0
    delay = parse_int(delay_days, default=0)

    if pct >= 100:
        return TaskStatus.COMPLETED
    if delay > 0:
        return TaskStatus.OVERDUE
    if pct <= 0:
        return TaskStatus.NOT_STARTED
    return TaskStatus.IN_PROGRESS


def is_overdue(task: Task, now: Optional[datetime] = None) -> bool:
    """
    Task is late: backend delay, or end date already passed while unfinished
    """
    if task.delay_days > 0:
        return True
    if task.end_date is None or task.completion_pct >= 100:
        return False
    now = now or get_current_datetime()
    return task.end_date < now


def task_status(task: Task, now: Optional[datetime] = None, use_end_date: bool = False) -> TaskStatus:
    """
    Status of a task DTO

    Args:
        task: Task
        now: Reference time for the end date rule
        use_end_date: Also treat a passed end date as overdue
            (employee progress view)

    Returns:
        TaskStatus
    """
    if task.completion_pct >= 100:
        return TaskStatus.COMPLETED
    if use_end_date and is_overdue(task, now):
        return TaskStatus.OVERDUE
    return classify_status(task.completion_pct, task.delay_days, task.has_started)


def status_filter_label(status: TaskStatus) -> str:
    return STATUS_FILTER_LABELS[status]


def status_badge_label(status: TaskStatus) -> str:
    return STATUS_BADGE_LABELS[status]


def status_from_label(label: Optional[str]) -> Optional[TaskStatus]:
    """
    Resolve a filter or badge label (case-insensitive) or an enum value

    Returns:
        TaskStatus or None for blank/unknown labels
    """
    if not label:
        return None
    wanted = label.strip().lower()
    for status in TaskStatus:
        candidates = (status.value, STATUS_FILTER_LABELS[status], STATUS_BADGE_LABELS[status])
        if wanted in (candidate.lower() for candidate in candidates):
            return status
    return None


def status_from_percentage(percentage: Any) -> str:
    """Status text stored on imported spreadsheet rows"""
    pct = to_float(percentage) or 0.0
    if pct >= 100:
        return "Concluído"
    if pct <= 0:
        return "Não Iniciado"
    return "Em Andamento"


def count_statuses(tasks: Iterable[Task], now: Optional[datetime] = None, use_end_date: bool = False) -> TaskProgress:
    """Counters shown above the task table"""
    counters = {status: 0 for status in TaskStatus}
    total = 0
    for task in tasks:
        counters[task_status(task, now, use_end_date)] += 1
        total += 1
    return TaskProgress(
        total=total,
        concluded=counters[TaskStatus.COMPLETED],
        in_progress=counters[TaskStatus.IN_PROGRESS],
        not_started=counters[TaskStatus.NOT_STARTED],
        overdue=counters[TaskStatus.OVERDUE],
    )


def can_unstart(task: Task) -> bool:
    """A started task may be reset unless it is already complete"""
    return task.has_started and task.completion_pct < 100
