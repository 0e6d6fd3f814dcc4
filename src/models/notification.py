"""
Notification models
"""

from enum import Enum
from datetime import datetime
from pydantic import BaseModel


class NotificationType(str, Enum):
    """Notification severity"""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class NotificationCategory(str, Enum):
    """Notification category"""
    EVENT = "event"
    SYSTEM = "system"
    TASK = "task"


class Notification(BaseModel):
    """Client-side notification"""
    
    id: str
    title: str
    message: str
    type: NotificationType = NotificationType.INFO
    timestamp: datetime
    read: bool = False
    category: NotificationCategory = NotificationCategory.SYSTEM


class NotificationSettings(BaseModel):
    """Notification preferences"""
    
    event_notifications: bool = True
    email_notifications: bool = True
    push_notifications: bool = True
