"""
Dashboard session: explicit owner of the per-session state
"""

from typing import Optional
from src.api.dashboard_client import DashboardClient
from src.services.calendar_service import CalendarService
from src.services.local_store import LocalStore
from src.services.notification_center import NotificationCenter
from src.services.preferences_service import PreferencesService
from src.services.progress_service import ProgressService
from src.services.schedule_service import ScheduleService
from src.services.spreadsheet_registry import SpreadsheetRegistry
from src.services.team_service import TeamService
from src.utils.logger import logger
from src.utils.request_guard import RequestGenerations


class DashboardSession:
    """Wires the client, local stores and view services for one session"""

    def __init__(self, client: Optional[DashboardClient] = None, store: Optional[LocalStore] = None):
        """
        Initialize session

        Args:
            client: Backend client (created from settings when omitted)
            store: Local store (created from settings when omitted)
        """
        self.client = client or DashboardClient()
        self.store = store or LocalStore()
        self.generations = RequestGenerations()

        self.notifications = NotificationCenter(self.store)
        self.preferences = PreferencesService(self.store)
        self.spreadsheets = SpreadsheetRegistry(self.store)

        self.schedule = ScheduleService(self.client, self.generations.for_view("schedule"))
        self.progress = ProgressService(self.client, self.generations.for_view("progress"))
        self.calendar = CalendarService(self.client, self.generations.for_view("calendar"))
        self.team = TeamService(self.client)

        self.logger = logger

    async def close(self):
        """Release the HTTP client"""
        await self.client.close()
        self.logger.info("[DashboardSession] Session closed")
