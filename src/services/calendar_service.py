"""
Calendar / Gantt service for the logged-in employee's tasks
"""

import uuid
from datetime import date, datetime
from typing import List, Optional
from src.api.dashboard_client import DashboardClient
from src.models.event import Event
from src.models.task import EmployeeTaskUpdate
from src.services.event_mapper import events_for_day, map_tasks_to_events
from src.services.timeline import (
    Direction,
    GanttLayout,
    ViewMode,
    apply_zoom,
    build_gantt_layout,
    shift_reference,
)
from src.config.constants import ZOOM_DEFAULT
from src.utils.date_utils import today
from src.utils.error_handler import ValidationError
from src.utils.logger import logger
from src.utils.request_guard import RequestGeneration


class CalendarService:
    """Holds the calendar view state: events, anchor date, view mode and zoom"""

    def __init__(self, client: DashboardClient, generation: Optional[RequestGeneration] = None):
        self.client = client
        self.generation = generation or RequestGeneration("calendar")
        self.logger = logger
        self.events: List[Event] = []
        self.reference_date: date = today()
        self.view_mode: ViewMode = ViewMode.MONTH
        self.zoom: float = ZOOM_DEFAULT

    async def load_events(self, now: Optional[datetime] = None) -> List[Event]:
        """
        Load the user's tasks and map them onto events

        The caller always gets the events it fetched; the view state is
        replaced only by the newest request.
        """
        ticket = self.generation.next()
        tasks = await self.client.get_employee_tasks()
        events = map_tasks_to_events(tasks, now)
        if self.generation.is_current(ticket):
            self.events = events
            self.logger.info(f"[CalendarService] Loaded {len(events)} events")
        else:
            self.logger.info(f"[CalendarService] Response {ticket} is stale, view state kept")
        return events

    def navigate(self, direction: Direction) -> date:
        self.reference_date = shift_reference(self.reference_date, direction, self.view_mode)
        return self.reference_date

    def set_view_mode(self, view_mode: ViewMode) -> None:
        self.view_mode = ViewMode(view_mode)

    def change_zoom(self, direction: Direction) -> float:
        self.zoom = apply_zoom(self.zoom, direction)
        return self.zoom

    def layout(self) -> GanttLayout:
        return build_gantt_layout(self.events, self.reference_date, self.view_mode, self.zoom)

    def events_on(self, day: date) -> List[Event]:
        return events_for_day(self.events, day)

    def _find(self, event_id: str) -> Event:
        for event in self.events:
            if event.id == event_id:
                return event
        raise ValidationError(f"Evento '{event_id}' não encontrado.")

    async def save_event(self, event: Event, event_id: Optional[str] = None) -> Event:
        """
        Create a local event or update an existing one

        Updates of events mapped from backend tasks push duration and
        progress to the backend before the local copy changes.

        Args:
            event: Event data
            event_id: ID of the edited event, None to create

        Returns:
            Stored event
        """
        if event_id is None:
            created = event.model_copy(update={"id": f"event-{uuid.uuid4().hex}"})
            self.events.append(created)
            return created

        existing = self._find(event_id)
        if existing.is_backend_task:
            update = EmployeeTaskUpdate.from_progress(event.duration, event.progress)
            await self.client.update_employee_task(existing.file_id, existing.num, update)
            self.logger.info(f"[CalendarService] Updated backend task {existing.file_id}/{existing.num}")

        updated = event.model_copy(update={
            "id": existing.id,
            "file_id": existing.file_id,
            "num": existing.num,
        })
        self.events = [updated if e.id == existing.id else e for e in self.events]
        return updated

    def delete_event(self, event_id: str) -> None:
        """Remove an event from the local view"""
        self._find(event_id)
        self.events = [e for e in self.events if e.id != event_id]
