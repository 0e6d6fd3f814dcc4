"""
Tests for DashboardClient
"""

import json
import httpx
import pytest
from src.api.dashboard_client import DashboardClient
from src.models.task import EmployeeTaskUpdate, Task, TaskUpdate
from src.utils.error_handler import APIError

BASE_URL = "http://backend.test"


def make_client(handler, **kwargs) -> DashboardClient:
    return DashboardClient(base_url=BASE_URL, transport=httpx.MockTransport(handler), **kwargs)


@pytest.fixture(autouse=True)
def no_retry_delay(monkeypatch):
    """Retries happen without waiting"""
    monkeypatch.setattr("src.api.base_client.RETRY_DELAY", 0)


@pytest.mark.asyncio
async def test_list_files():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={"arquivos": [
            {"id": 3, "nome": "cronograma.xlsx", "projeto": "Alpha", "importedAt": "Tue, 05 Nov 2024 10:00:00 GMT"},
            {"nome": "sem id"},
            "lixo",
        ]})

    async with make_client(handler) as client:
        files = await client.list_files()

    assert requests[0].url.path == "/arquivos_usuario"
    assert len(files) == 1
    assert files[0].id == "3"
    assert files[0].label == "Alpha | cronograma.xlsx"


@pytest.mark.asyncio
async def test_session_cookie_is_sent():
    seen = {}

    def handler(request):
        seen["cookie"] = request.headers.get("cookie")
        return httpx.Response(200, json={"arquivos": []})

    async with make_client(handler, session_cookie="abc123") as client:
        await client.list_files()

    assert seen["cookie"] == "session=abc123"


@pytest.mark.asyncio
async def test_get_sheet_rows_fills_ids():
    def handler(request):
        assert request.url.path == "/arquivo/f 1/dados"
        return httpx.Response(200, json={"dados": [
            {"num": 1, "nome": "Definir embalagem", "conclusion": 0.5},
            {"nome": "Sem número"},
        ]})

    async with make_client(handler) as client:
        tasks = await client.get_sheet_rows("f 1")

    assert [t.id for t in tasks] == ["1", "1"]
    assert tasks[0].completion_pct == 50
    assert all(t.file_id == "f 1" for t in tasks)


@pytest.mark.asyncio
async def test_row_operations_use_expected_routes():
    calls = []

    def handler(request):
        body = json.loads(request.content) if request.content else None
        calls.append((request.method, request.url.path, body))
        return httpx.Response(200, json={"ok": True})

    update = TaskUpdate.from_task(Task(number=4, name="Selar", completion_pct=50))
    async with make_client(handler) as client:
        await client.start_task("f1", 4)
        await client.unstart_task("f1", 4)
        await client.update_row("f1", 4, update)
        await client.delete_row("f1", 4)
        await client.delete_file("f1")
        await client.update_employee_task("f1", 4, EmployeeTaskUpdate(duration="2", conclusion=0.5))

    assert [(method, path) for method, path, _ in calls] == [
        ("POST", "/arquivo/f1/start/4"),
        ("POST", "/arquivo/f1/unstart/4"),
        ("PATCH", "/arquivo/f1/linha/4"),
        ("DELETE", "/arquivo/f1/linha/4"),
        ("DELETE", "/delete/f1"),
        ("PATCH", "/employee/tasks/update/f1/4"),
    ]
    assert calls[2][2]["num"] == 4
    assert calls[2][2]["conclusion"] == 0.5
    assert calls[5][2] == {"duration": "2", "conclusion": 0.5}


@pytest.mark.asyncio
@pytest.mark.parametrize("employee_id,project_id,path", [
    (None, "null", "/employee/tasks"),
    ("10", "null", "/employee/tasks/10/null"),
    ("10", "7", "/employee/tasks/10/7"),
    ("10", "", "/employee/tasks/10/null"),
])
async def test_employee_task_routes(employee_id, project_id, path):
    def handler(request):
        assert request.url.path == path
        return httpx.Response(200, json={"tasks": [{"num": 2, "id_file": "7", "deadline": "2024-11-20"}]})

    async with make_client(handler) as client:
        tasks = await client.get_employee_tasks(employee_id, project_id)

    assert tasks[0].file_id == "7"
    assert tasks[0].deadline is not None


@pytest.mark.asyncio
async def test_team_endpoints():
    def handler(request):
        if request.url.path == "/team/info":
            assert request.method == "POST"
        return httpx.Response(200, json={"employees": [{"id": 1, "name": "Ana"}]})

    async with make_client(handler) as client:
        assert await client.list_employees() == [{"id": 1, "name": "Ana"}]
        assert await client.get_team_info() == [{"id": 1, "name": "Ana"}]


@pytest.mark.asyncio
async def test_get_progress():
    def handler(request):
        assert request.url.path == "/project/progress_tasks/null"
        return httpx.Response(200, json={"progresso": {"total": 4, "concluded": 1, "overdue": "2"}})

    async with make_client(handler) as client:
        progress = await client.get_progress()

    assert progress.total == 4
    assert progress.overdue == 2
    assert progress.completion_rate == 25


@pytest.mark.asyncio
async def test_missing_list_key_returns_empty():
    async with make_client(lambda request: httpx.Response(204)) as client:
        assert await client.list_files() == []
        assert (await client.get_progress("7")).total == 0


@pytest.mark.asyncio
async def test_client_error_is_not_retried():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(404, json={"mensagem": "Arquivo não encontrado"})

    async with make_client(handler) as client:
        with pytest.raises(APIError) as exc_info:
            await client.get_sheet_rows("f1")

    assert len(calls) == 1
    assert exc_info.value.error_code == "404"
    assert exc_info.value.message == "Arquivo não encontrado"


@pytest.mark.asyncio
async def test_server_error_is_retried():
    calls = []

    def handler(request):
        calls.append(request)
        if len(calls) < 3:
            return httpx.Response(503, text="unavailable")
        return httpx.Response(200, json={"dados": []})

    async with make_client(handler) as client:
        assert await client.get_sheet_rows("f1") == []

    assert len(calls) == 3


@pytest.mark.asyncio
async def test_transport_error_raises_after_retries():
    calls = []

    def handler(request):
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    async with make_client(handler) as client:
        with pytest.raises(APIError):
            await client.list_files()

    assert len(calls) == 3
