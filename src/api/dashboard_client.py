"""
Schedule backend REST client
"""

from typing import Any, Dict, List, Optional
from urllib.parse import quote
import httpx
from src.api.base_client import BaseAPIClient
from src.config.settings import settings
from src.config.constants import ALL_PROJECTS_ID
from src.models.project import ProjectFile
from src.models.task import EmployeeTaskUpdate, Task, TaskProgress, TaskUpdate
from src.utils.logger import logger


def _segment(value: Any) -> str:
    """Path segment, percent-encoded"""
    return quote(str(value), safe="")


def _items(payload: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    """List under key, ignoring malformed entries"""
    items = payload.get(key)
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


class DashboardClient(BaseAPIClient):
    """Client for the schedule dashboard backend"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        session_cookie: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize dashboard client

        Args:
            base_url: Backend URL (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
            session_cookie: Backend session cookie value
            transport: Custom httpx transport
        """
        session_cookie = session_cookie or settings.DASHBOARD_SESSION_COOKIE
        super().__init__(
            base_url or settings.DASHBOARD_API_BASE_URL,
            timeout=timeout or settings.DASHBOARD_API_TIMEOUT,
            cookies={"session": session_cookie} if session_cookie else None,
            transport=transport,
        )
        self.logger = logger

    # Files (imported schedules)

    async def list_files(self) -> List[ProjectFile]:
        """Schedule files visible to the user"""
        payload = await self.get("arquivos_usuario")
        files = []
        for item in _items(payload, "arquivos"):
            if item.get("id") is None and item.get("id_file") is None:
                continue
            files.append(ProjectFile.model_validate(item))
        self.logger.debug(f"[DashboardClient] Loaded {len(files)} files")
        return files

    async def delete_file(self, file_id: str) -> None:
        """Delete an imported schedule file"""
        await self.delete(f"delete/{_segment(file_id)}")

    # Schedule rows

    async def get_sheet_rows(self, file_id: str) -> List[Task]:
        """Task rows of a schedule file"""
        payload = await self.get(f"arquivo/{_segment(file_id)}/dados")
        tasks = [Task.model_validate(row) for row in _items(payload, "dados")]
        for index, task in enumerate(tasks):
            if not task.id:
                task.id = str(index)
            task.file_id = task.file_id or file_id
        return tasks

    async def start_task(self, file_id: str, number: int) -> Dict[str, Any]:
        """Mark a task as started"""
        return await self.post(f"arquivo/{_segment(file_id)}/start/{number}")

    async def unstart_task(self, file_id: str, number: int) -> Dict[str, Any]:
        """Clear a task's start"""
        return await self.post(f"arquivo/{_segment(file_id)}/unstart/{number}")

    async def update_row(self, file_id: str, number: int, update: TaskUpdate) -> Dict[str, Any]:
        """
        Create or update a schedule row

        Args:
            file_id: Schedule file ID
            number: Row number, 0 creates a new row
            update: Row payload
        """
        return await self.patch(
            f"arquivo/{_segment(file_id)}/linha/{number}",
            json_data=update.to_payload(),
        )

    async def delete_row(self, file_id: str, number: int) -> Dict[str, Any]:
        """Delete a schedule row"""
        return await self.delete(f"arquivo/{_segment(file_id)}/linha/{number}")

    # Employee tasks

    async def get_employee_tasks(
        self,
        employee_id: Optional[str] = None,
        project_id: str = ALL_PROJECTS_ID,
    ) -> List[Task]:
        """
        Tasks assigned to an employee

        Args:
            employee_id: Employee ID, None for the logged-in user
            project_id: Project filter, "null" for all projects

        Returns:
            List of tasks
        """
        if employee_id is None:
            endpoint = "employee/tasks"
        else:
            endpoint = f"employee/tasks/{_segment(employee_id)}/{_segment(project_id or ALL_PROJECTS_ID)}"
        payload = await self.get(endpoint)
        return [Task.model_validate(item) for item in _items(payload, "tasks")]

    async def update_employee_task(self, file_id: str, number: int, update: EmployeeTaskUpdate) -> Dict[str, Any]:
        """Push duration/progress of an employee task"""
        return await self.patch(
            f"employee/tasks/update/{_segment(file_id)}/{number}",
            json_data=update.model_dump(),
        )

    # Team

    async def list_employees(self) -> List[Dict[str, Any]]:
        """Employees of the user's team (raw payload)"""
        payload = await self.get("team/employees")
        return _items(payload, "employees")

    async def get_team_info(self) -> List[Dict[str, Any]]:
        """Team members with contact data (raw payload)"""
        payload = await self.post("team/info", json_data={})
        return _items(payload, "employees")

    # Progress

    async def get_progress(self, project_id: str = ALL_PROJECTS_ID) -> TaskProgress:
        """Status counters for a project, "null" sums all team projects"""
        payload = await self.get(f"project/progress_tasks/{_segment(project_id or ALL_PROJECTS_ID)}")
        progress = payload.get("progresso")
        return TaskProgress.model_validate(progress if isinstance(progress, dict) else {})
