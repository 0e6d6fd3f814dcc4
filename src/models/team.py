"""
Team models
"""

from enum import Enum
from typing import Any, List
from pydantic import BaseModel, field_validator
from src.utils.numbers import parse_int


class MemberStatus(str, Enum):
    """Team member status"""
    ACTIVE = "active"
    INACTIVE = "inactive"


class TeamMember(BaseModel):
    """Team member card"""
    
    id: str
    name: str
    role: str = ""
    team: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    status: MemberStatus = MemberStatus.INACTIVE
    tasks_completed: int = 0
    
    @field_validator("tasks_completed", mode="before")
    @classmethod
    def _coerce_count(cls, value: Any) -> int:
        return max(0, parse_int(value, default=0))
    
    @property
    def is_active(self) -> bool:
        return self.status == MemberStatus.ACTIVE


class TeamOverview(BaseModel):
    """Team header data plus members"""
    
    team_name: str = ""
    ongoing_projects: int = 0
    members: List[TeamMember] = []
    
    @property
    def active_count(self) -> int:
        return sum(1 for member in self.members if member.is_active)
    
    @property
    def tasks_completed(self) -> int:
        return sum(member.tasks_completed for member in self.members)


class Employee(BaseModel):
    """Employee entry of the progress table"""
    
    id: str
    name: str
    
    @field_validator("id", "name", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return "" if value is None else str(value).strip()
