"""
Schedule table filters
"""

from datetime import datetime
from typing import Callable, Iterable, List, Optional
from pydantic import BaseModel
from src.config.constants import CONDITION_ALWAYS
from src.models.task import Task
from src.services.status_classifier import status_from_label, task_status


class ScheduleFilters(BaseModel):
    """Filters selected in the filter panel"""

    classification: List[str] = []
    category: List[str] = []
    condition: Optional[str] = None
    phase: List[str] = []
    status: Optional[str] = None  # filter label, e.g. "Atrasadas"


def _matches_condition(task: Task, condition: Optional[str]) -> bool:
    if not condition:
        return True
    # "Sempre" tasks apply to every condition
    if task.condition.lower() == CONDITION_ALWAYS:
        return True
    return task.condition == condition


def filter_tasks(
    tasks: Iterable[Task],
    filters: ScheduleFilters,
    now: Optional[datetime] = None,
    use_end_date: bool = False,
) -> List[Task]:
    """
    Apply filter panel selections to the task list

    Args:
        tasks: Tasks of the selected schedule
        filters: Selected filters
        now: Reference time for the overdue rule
        use_end_date: Passed end date counts as overdue

    Returns:
        Matching tasks, original order kept
    """
    wanted_status = status_from_label(filters.status)
    result = []
    for task in tasks:
        if filters.classification and task.classification not in filters.classification:
            continue
        if filters.category and task.category not in filters.category:
            continue
        if not _matches_condition(task, filters.condition):
            continue
        if filters.phase and task.phase not in filters.phase:
            continue
        if wanted_status is not None and task_status(task, now, use_end_date) != wanted_status:
            continue
        result.append(task)
    return result


def _options(tasks: Iterable[Task], getter: Callable[[Task], str]) -> List[str]:
    return sorted({getter(task).strip() for task in tasks if getter(task).strip()})


def classification_options(tasks: Iterable[Task]) -> List[str]:
    """Sorted unique classifications"""
    return _options(tasks, lambda task: task.classification)


def phase_options(tasks: Iterable[Task]) -> List[str]:
    """Sorted unique phases"""
    return _options(tasks, lambda task: task.phase)


def category_options(tasks: Iterable[Task]) -> List[str]:
    """Sorted unique categories"""
    return _options(tasks, lambda task: task.category)
