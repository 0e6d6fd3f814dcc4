"""
Schedule table service: one imported schedule and its tasks
"""

import uuid
from typing import List, Optional
from src.api.dashboard_client import DashboardClient
from src.models.task import Task, TaskProgress, TaskUpdate
from src.services.schedule_filter import ScheduleFilters, filter_tasks
from src.services.status_classifier import can_unstart, count_statuses
from src.utils.error_handler import APIError, ValidationError
from src.utils.logger import logger
from src.utils.request_guard import RequestGeneration


class ScheduleService:
    """
    Load and edit the tasks of a schedule file

    Every backend operation names its file explicitly. The selected file
    and its rows (``file_id``/``tasks``) are the view state shown in the
    table; only the newest load may replace them.
    """

    def __init__(self, client: DashboardClient, generation: Optional[RequestGeneration] = None):
        """
        Initialize schedule service

        Args:
            client: Backend client
            generation: Request generation of the schedule view
        """
        self.client = client
        self.generation = generation or RequestGeneration("schedule")
        self.logger = logger
        self.file_id: Optional[str] = None
        self.tasks: List[Task] = []
        self.error: Optional[str] = None

    @staticmethod
    def _require_file(file_id: Optional[str]) -> str:
        if not file_id:
            raise ValidationError("Selecione uma planilha antes de continuar.")
        return file_id

    @staticmethod
    def _find(tasks: List[Task], task_id: str) -> Task:
        for task in tasks:
            if task.id == task_id:
                return task
        raise ValidationError(f"Tarefa '{task_id}' não encontrada.")

    @staticmethod
    def _row_number(task: Task) -> int:
        if task.number is None or task.number < 1:
            raise ValidationError("Número de linha inválido.")
        return task.number

    async def load_tasks(self, file_id: Optional[str] = None) -> List[Task]:
        """
        Fetch the tasks of a schedule file

        The caller always gets the rows of the file it asked for. The view
        state is replaced only when no newer load was started meanwhile.

        Args:
            file_id: Schedule to load; the selected one when None

        Returns:
            Tasks of the requested schedule

        Raises:
            APIError: Backend request failed
        """
        requested_file = file_id or self.file_id
        ticket = self.generation.next()
        if file_id is not None:
            self.file_id = file_id
        if not requested_file:
            self.tasks = []
            return []

        self.logger.info(f"[ScheduleService] Loading tasks of file {requested_file} (request {ticket})")

        try:
            tasks = await self.client.get_sheet_rows(requested_file)
        except APIError:
            if self.generation.is_current(ticket):
                self.error = "Erro ao carregar dados da planilha."
                self.tasks = []
            raise

        if self.generation.is_current(ticket):
            self.tasks = tasks
            self.error = None
        else:
            self.logger.info(f"[ScheduleService] Response {ticket} for file {requested_file} is stale, view state kept")

        self.logger.info(f"[ScheduleService] Loaded {len(tasks)} tasks")
        return tasks

    async def start_task(self, file_id: str, task_id: str) -> List[Task]:
        """Start a task of the given file and return the refreshed rows"""
        file_id = self._require_file(file_id)
        task = self._find(await self.load_tasks(file_id), task_id)
        await self.client.start_task(file_id, self._row_number(task))
        return await self.load_tasks(file_id)

    async def unstart_task(self, file_id: str, task_id: str) -> List[Task]:
        """
        Reset a task's start

        Raises:
            ValidationError: Task is complete or was never started
        """
        file_id = self._require_file(file_id)
        task = self._find(await self.load_tasks(file_id), task_id)
        if not can_unstart(task):
            raise ValidationError("Não é possível desfazer o início desta tarefa.")
        await self.client.unstart_task(file_id, self._row_number(task))
        return await self.load_tasks(file_id)

    async def save_task(self, file_id: str, task: Task) -> List[Task]:
        """
        Save an edited or new row of the given file

        Rows without a valid number are created (row 0 on the backend).
        """
        file_id = self._require_file(file_id)
        is_new = task.number is None or task.number < 1
        update = TaskUpdate.from_task(task, is_new=is_new)
        await self.client.update_row(file_id, 0 if is_new else task.number, update)
        self.logger.info(f"[ScheduleService] Saved task '{task.name}' in file {file_id} (new: {is_new})")
        return await self.load_tasks(file_id)

    async def delete_task(self, file_id: str, task_id: str) -> List[Task]:
        """Delete a row on the backend and return the refreshed rows"""
        file_id = self._require_file(file_id)
        task = self._find(await self.load_tasks(file_id), task_id)
        await self.client.delete_row(file_id, self._row_number(task))
        return await self.load_tasks(file_id)

    def add_blank_task(self, name: str = "Nova tarefa") -> Task:
        """Append an unsaved row to the table"""
        task = Task(id=str(uuid.uuid4()), number=0, name=name)
        self.tasks.append(task)
        return task

    def filtered(self, filters: ScheduleFilters, tasks: Optional[List[Task]] = None) -> List[Task]:
        """Filter the given rows, or the table's rows when None"""
        return filter_tasks(self.tasks if tasks is None else tasks, filters)

    def counters(self, tasks: Optional[List[Task]] = None) -> TaskProgress:
        return count_statuses(self.tasks if tasks is None else tasks)
