"""
Tests for TeamService
"""

import pytest
from src.models.team import MemberStatus
from src.services.team_service import (
    TeamService,
    format_location,
    member_from_payload,
    overview_from_payload,
    parse_active,
)
from src.utils.error_handler import APIError

EMPLOYEES = [
    {
        "user_id": 1,
        "first_name": "Ana",
        "last_name": "Lima",
        "email": "ana@example.com",
        "role": "Analista",
        "cellphone": "11 99999-0000",
        "address": {"street": "Rua A, 10", "city": "Campinas", "state": "SP", "country": ""},
        "active": "1",
        "completed_tasks": 5,
        "team_name": "Embalagens",
        "ongoing_projects": "3",
    },
    {
        "user_id": 2,
        "first_name": None,
        "last_name": None,
        "email": "rui@example.com",
        "active": 0,
        "completed_tasks": None,
    },
]


@pytest.mark.parametrize("value,expected", [
    (True, True), (1, True), ("1", True), ("true", True), ("TRUE", True),
    (False, False), (0, False), ("0", False), (None, False), ("sim", False),
])
def test_parse_active(value, expected):
    assert parse_active(value) is expected


def test_format_location():
    assert format_location({"street": "Rua B", "city": "Recife", "state": None}) == "Rua B, Recife"
    assert format_location(None) == ""


def test_member_from_payload():
    member = member_from_payload(EMPLOYEES[0], "Embalagens")
    assert member.id == "1"
    assert member.name == "Ana Lima"
    assert member.phone == "11 99999-0000"
    assert member.location == "Rua A, 10, Campinas, SP"
    assert member.status == MemberStatus.ACTIVE


def test_member_name_falls_back_to_email():
    member = member_from_payload(EMPLOYEES[1])
    assert member.name == "rui@example.com"
    assert member.team == "Equipe"
    assert member.status == MemberStatus.INACTIVE
    assert member.tasks_completed == 0


def test_overview_from_payload():
    overview = overview_from_payload(EMPLOYEES)
    assert overview.team_name == "Embalagens"
    assert overview.ongoing_projects == 3
    assert overview.active_count == 1
    assert overview.tasks_completed == 5


def test_overview_of_empty_team():
    overview = overview_from_payload([])
    assert overview.members == []
    assert overview.ongoing_projects == 0


@pytest.mark.asyncio
async def test_get_overview(mock_dashboard_client):
    mock_dashboard_client.get_team_info.return_value = EMPLOYEES
    overview = await TeamService(mock_dashboard_client).get_overview()
    assert len(overview.members) == 2


@pytest.mark.asyncio
async def test_get_overview_propagates_errors(mock_dashboard_client):
    mock_dashboard_client.get_team_info.side_effect = APIError("down", error_code="503")
    with pytest.raises(APIError):
        await TeamService(mock_dashboard_client).get_overview()
