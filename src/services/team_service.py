"""
Team service
"""

from typing import Any, Dict, List
from src.api.dashboard_client import DashboardClient
from src.models.team import MemberStatus, TeamMember, TeamOverview
from src.utils.logger import logger
from src.utils.numbers import parse_int


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def parse_active(value: Any) -> bool:
    """Backend sends true/1/"1"/"true" for active members"""
    if value is True or value == 1:
        return True
    return _text(value).lower() in ("1", "true")


def format_location(address: Any) -> str:
    """street, city, state, country (blank parts skipped)"""
    if not isinstance(address, dict):
        return ""
    parts = [_text(address.get(key)) for key in ("street", "city", "state", "country")]
    return ", ".join(part for part in parts if part)


def member_from_payload(employee: Dict[str, Any], team_name: str = "") -> TeamMember:
    """
    Build a team member card from a backend employee entry

    Args:
        employee: Raw employee payload
        team_name: Team name shared by all members

    Returns:
        TeamMember
    """
    name = f"{_text(employee.get('first_name'))} {_text(employee.get('last_name'))}".strip()
    return TeamMember(
        id=_text(employee.get("user_id")),
        name=name or _text(employee.get("email")),
        role=_text(employee.get("role")),
        team=team_name or "Equipe",
        email=_text(employee.get("email")),
        phone=_text(employee.get("cellphone")),
        location=format_location(employee.get("address")),
        status=MemberStatus.ACTIVE if parse_active(employee.get("active")) else MemberStatus.INACTIVE,
        tasks_completed=employee.get("completed_tasks"),
    )


def overview_from_payload(employees: List[Dict[str, Any]]) -> TeamOverview:
    """Team name and ongoing projects come from the first entry"""
    first = employees[0] if employees else {}
    team_name = _text(first.get("team_name"))
    return TeamOverview(
        team_name=team_name,
        ongoing_projects=max(0, parse_int(first.get("ongoing_projects"), default=0)),
        members=[member_from_payload(employee, team_name) for employee in employees],
    )


class TeamService:
    """Service for the team page"""

    def __init__(self, client: DashboardClient):
        self.client = client
        self.logger = logger

    async def get_overview(self) -> TeamOverview:
        """
        Load team members

        Raises:
            APIError: Backend request failed
        """
        employees = await self.client.get_team_info()
        overview = overview_from_payload(employees)
        self.logger.info(
            f"[TeamService] Team '{overview.team_name}' with {len(overview.members)} members"
        )
        return overview
