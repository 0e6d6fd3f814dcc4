"""
Calendar / Gantt event model
"""

from enum import Enum
from typing import Any, List, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from src.utils.date_parser import parse_date
from src.utils.numbers import clamp_percent, parse_duration_days


class EventType(str, Enum):
    """Event types shown on the calendar"""
    MEETING = "meeting"
    DEADLINE = "deadline"
    REVIEW = "review"
    OTHER = "other"


class Priority(str, Enum):
    """Event priority (left border color on the Gantt bar)"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Event(BaseModel):
    """Calendar entry or a backend task mapped onto the timeline"""
    
    model_config = ConfigDict(populate_by_name=True)
    
    id: str
    title: str
    date: datetime
    time: str = ""
    type: EventType = EventType.OTHER
    participants: List[str] = []
    location: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = None  # days
    progress: Optional[int] = None  # 0..100
    priority: Optional[Priority] = None
    dependencies: List[str] = []
    file_id: Optional[str] = Field(None, alias="id_file")
    num: Optional[int] = None
    deadline: Optional[datetime] = None
    
    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Any:
        # Invalid dates are left for pydantic to reject: an event needs a day
        return parse_date(value) or value
    
    @field_validator("deadline", mode="before")
    @classmethod
    def _coerce_deadline(cls, value: Any) -> Optional[datetime]:
        return parse_date(value)
    
    @field_validator("duration", mode="before")
    @classmethod
    def _coerce_duration(cls, value: Any) -> Optional[int]:
        if value is None:
            return None
        return parse_duration_days(value)
    
    @field_validator("progress", mode="before")
    @classmethod
    def _coerce_progress(cls, value: Any) -> Optional[int]:
        if value is None:
            return None
        return clamp_percent(value)
    
    @property
    def is_backend_task(self) -> bool:
        """Event was mapped from a backend task (editable remotely)"""
        return self.file_id is not None and self.num is not None
