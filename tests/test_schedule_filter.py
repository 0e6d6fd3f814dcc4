"""
Tests for the schedule table filters
"""

from datetime import datetime
from src.models.task import Task
from src.services.schedule_filter import (
    ScheduleFilters,
    category_options,
    classification_options,
    filter_tasks,
    phase_options,
)


def numbers(tasks):
    return [task.number for task in tasks]


def test_no_filters_keeps_everything(sheet_tasks):
    assert numbers(filter_tasks(sheet_tasks, ScheduleFilters())) == [1, 2, 3, 4]


def test_classification_filter(sheet_tasks):
    assert numbers(filter_tasks(sheet_tasks, ScheduleFilters(classification=["A"]))) == [1, 2]


def test_condition_filter_includes_always_tasks(sheet_tasks):
    """Tasks with condition "Sempre" match any selected condition"""
    assert numbers(filter_tasks(sheet_tasks, ScheduleFilters(condition="A"))) == [1, 2]
    assert numbers(filter_tasks(sheet_tasks, ScheduleFilters(condition="C"))) == [2, 4]


def test_phase_filter(sheet_tasks):
    assert numbers(filter_tasks(sheet_tasks, ScheduleFilters(phase=["Testes"]))) == [2, 4]


def test_status_filter(sheet_tasks):
    assert numbers(filter_tasks(sheet_tasks, ScheduleFilters(status="Atrasadas"))) == [2]
    assert numbers(filter_tasks(sheet_tasks, ScheduleFilters(status="Concluídas"))) == [1]


def test_combined_filters(sheet_tasks):
    filters = ScheduleFilters(classification=["B"], category=["Blisters"])
    assert numbers(filter_tasks(sheet_tasks, filters)) == [3]


def test_status_filter_with_end_date(now):
    tasks = [
        Task(number=1, completion_pct=20, end_date=datetime(2024, 11, 1)),
        Task(number=2, completion_pct=20, end_date=datetime(2024, 12, 1)),
    ]
    filters = ScheduleFilters(status="Atrasadas")
    assert numbers(filter_tasks(tasks, filters, now)) == []
    assert numbers(filter_tasks(tasks, filters, now, use_end_date=True)) == [1]


def test_filter_options(sheet_tasks):
    assert classification_options(sheet_tasks) == ["A", "B"]
    assert phase_options(sheet_tasks) == ["Projeto", "Testes"]
    assert category_options(sheet_tasks) == ["Ampolas", "Blisters", "Cartucho"]


def test_filter_options_skip_blank():
    assert classification_options([Task(classification=" "), Task(classification="C")]) == ["C"]
