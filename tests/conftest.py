"""
Pytest configuration and fixtures
"""

import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from src.api.dashboard_client import DashboardClient
from src.models.task import Task, TaskProgress
from src.services.local_store import LocalStore


def make_task(**fields) -> Task:
    """Task built from backend-style keys"""
    return Task.model_validate(fields)


@pytest.fixture
def sheet_tasks():
    """Tasks of a schedule file, one per status"""
    return [
        make_task(num=1, classe="A", category="Blisters", phase="Projeto", condicao="A",
                  name="Definir embalagem", duration="5 dias", conclusion=1, atraso=3,
                  start_date="2024-11-01", responsavel="Maria da Silva Santos"),
        make_task(num=2, classe="A", category="Cartucho", phase="Testes", condicao="Sempre",
                  name="Testar selagem", duration=3, conclusion=0.5, atraso=2,
                  start_date="2024-11-04"),
        make_task(num=3, classe="B", category="Blisters", phase="Projeto", condicao="B",
                  name="Comprar insumos", duration="2", conclusion=0),
        make_task(num=4, classe="B", category="Ampolas", phase="Testes", condicao="C",
                  name="Validar lote", duration=4, conclusion=0.25,
                  start_date="2024-11-05"),
    ]


@pytest.fixture
def mock_dashboard_client(sheet_tasks):
    """Mock backend client"""
    client = MagicMock(spec=DashboardClient)
    client.list_files = AsyncMock(return_value=[])
    client.delete_file = AsyncMock(return_value=None)
    client.get_sheet_rows = AsyncMock(return_value=sheet_tasks)
    client.start_task = AsyncMock(return_value={})
    client.unstart_task = AsyncMock(return_value={})
    client.update_row = AsyncMock(return_value={})
    client.delete_row = AsyncMock(return_value={})
    client.get_employee_tasks = AsyncMock(return_value=[])
    client.update_employee_task = AsyncMock(return_value={})
    client.list_employees = AsyncMock(return_value=[])
    client.get_team_info = AsyncMock(return_value=[])
    client.get_progress = AsyncMock(return_value=TaskProgress())
    client.close = AsyncMock(return_value=None)
    return client


@pytest.fixture
def local_store(tmp_path):
    """Local store with temporary file"""
    return LocalStore(store_file=str(tmp_path / "store.json"))


@pytest.fixture
def now():
    """Fixed reference time"""
    return datetime(2024, 11, 15, 10, 0, 0)
