"""
Employee progress service
"""

from datetime import datetime
from typing import List, Optional
from src.api.dashboard_client import DashboardClient
from src.config.constants import ALL_PROJECTS_ID, ALL_PROJECTS_LABEL
from src.models.project import ProjectOption
from src.models.task import Task, TaskProgress
from src.models.team import Employee
from src.services.schedule_filter import ScheduleFilters, filter_tasks
from src.services.status_classifier import count_statuses
from src.utils.error_handler import APIError
from src.utils.logger import logger
from src.utils.request_guard import RequestGeneration


class ProgressService:
    """Per-employee task progress, filterable by project and status"""

    def __init__(self, client: DashboardClient, generation: Optional[RequestGeneration] = None):
        self.client = client
        self.generation = generation or RequestGeneration("progress")
        self.logger = logger
        self.tasks: List[Task] = []

    async def get_employees(self) -> List[Employee]:
        """Employees of the team; empty list when the backend fails"""
        try:
            raw = await self.client.list_employees()
        except APIError as e:
            self.logger.warning(f"[ProgressService] Failed to load employees: {e}")
            return []
        return [Employee.model_validate(item) for item in raw if item.get("id") is not None]

    async def get_project_options(self) -> List[ProjectOption]:
        """Project selector options, "all projects" first"""
        options = [ProjectOption(id=ALL_PROJECTS_ID, label=ALL_PROJECTS_LABEL)]
        try:
            files = await self.client.list_files()
        except APIError as e:
            self.logger.warning(f"[ProgressService] Failed to load projects: {e}")
            return options
        options.extend(ProjectOption(id=f.id, label=f.label) for f in files if f.id)
        return options

    async def load_tasks(self, employee_id: str, project_id: str = ALL_PROJECTS_ID) -> List[Task]:
        """
        Tasks of an employee, optionally for one project

        The caller always gets the tasks it asked for; the view state is
        replaced only by the newest request.
        """
        ticket = self.generation.next()
        tasks = await self.client.get_employee_tasks(employee_id, project_id or ALL_PROJECTS_ID)
        if self.generation.is_current(ticket):
            self.tasks = tasks
        else:
            self.logger.info(f"[ProgressService] Response {ticket} for employee {employee_id} is stale, view state kept")
        return tasks

    def filtered(
        self,
        status_label: Optional[str] = None,
        now: Optional[datetime] = None,
        tasks: Optional[List[Task]] = None,
    ) -> List[Task]:
        """Tasks matching the status filter (end date counts for overdue)"""
        source = self.tasks if tasks is None else tasks
        return filter_tasks(source, ScheduleFilters(status=status_label), now=now, use_end_date=True)

    def counters(self, now: Optional[datetime] = None, tasks: Optional[List[Task]] = None) -> TaskProgress:
        source = self.tasks if tasks is None else tasks
        return count_statuses(source, now=now, use_end_date=True)

    async def get_project_progress(self, project_id: str = ALL_PROJECTS_ID) -> TaskProgress:
        """Backend-computed counters for the reports page"""
        return await self.client.get_progress(project_id)
