"""
Notification center persisted in the local store
"""

import uuid
from typing import List, Optional
from pydantic import ValidationError as PydanticValidationError
from src.config.constants import NOTIFICATION_LIMIT
from src.models.notification import (
    Notification,
    NotificationCategory,
    NotificationSettings,
    NotificationType,
)
from src.services.local_store import LocalStore
from src.utils.date_utils import get_current_datetime
from src.utils.logger import logger

NOTIFICATIONS_KEY = "notifications"
SETTINGS_KEY = "notificationSettings"


class NotificationCenter:
    """Newest-first notification list, capped at NOTIFICATION_LIMIT"""

    def __init__(self, store: LocalStore, limit: int = NOTIFICATION_LIMIT):
        self.store = store
        self.limit = limit
        self.logger = logger
        self.notifications: List[Notification] = []
        self.settings = NotificationSettings()
        self._load()

    def _load(self):
        try:
            raw = self.store.get(NOTIFICATIONS_KEY) or []
            self.notifications = [Notification.model_validate(item) for item in raw][: self.limit]
        except (PydanticValidationError, TypeError) as e:
            self.logger.warning(f"[NotificationCenter] Error loading notifications: {e}")
            self.notifications = []
        try:
            self.settings = NotificationSettings.model_validate(self.store.get(SETTINGS_KEY) or {})
        except PydanticValidationError as e:
            self.logger.warning(f"[NotificationCenter] Error loading notification settings: {e}")
            self.settings = NotificationSettings()

    def _save(self):
        self.store.set(NOTIFICATIONS_KEY, [n.model_dump(mode="json") for n in self.notifications])

    @property
    def unread_count(self) -> int:
        return sum(1 for n in self.notifications if not n.read)

    def add(
        self,
        title: str,
        message: str,
        type: NotificationType = NotificationType.INFO,
        category: NotificationCategory = NotificationCategory.SYSTEM,
    ) -> Notification:
        """Add an unread notification on top, dropping the oldest beyond the limit"""
        notification = Notification(
            id=uuid.uuid4().hex,
            title=title,
            message=message,
            type=type,
            category=category,
            timestamp=get_current_datetime(),
            read=False,
        )
        self.notifications = [notification, *self.notifications][: self.limit]
        self._save()
        return notification

    def add_event_notification(self, title: str, message: str) -> Optional[Notification]:
        """Event notification, only when event notifications are enabled"""
        if not self.settings.event_notifications:
            return None
        return self.add(title, message, NotificationType.INFO, NotificationCategory.EVENT)

    def mark_as_read(self, notification_id: str):
        for notification in self.notifications:
            if notification.id == notification_id:
                notification.read = True
        self._save()

    def mark_all_as_read(self):
        for notification in self.notifications:
            notification.read = True
        self._save()

    def clear(self, notification_id: str):
        self.notifications = [n for n in self.notifications if n.id != notification_id]
        self._save()

    def clear_all(self):
        self.notifications = []
        self._save()

    def update_settings(self, **changes) -> NotificationSettings:
        """Partial settings update"""
        self.settings = self.settings.model_copy(update=changes)
        self.store.set(SETTINGS_KEY, self.settings.model_dump())
        return self.settings
