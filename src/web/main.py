"""
JSON web interface for the dashboard views
"""

from datetime import date
from typing import List, Optional
from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel
from src.config.constants import ALL_PROJECTS_ID, ZOOM_DEFAULT
from src.config.settings import settings
from src.models.event import Event
from src.models.task import Task
from src.services.schedule_filter import (
    ScheduleFilters,
    category_options,
    classification_options,
    phase_options,
)
from src.services.session import DashboardSession
from src.services.status_classifier import status_badge_label, task_status
from src.services.timeline import ViewMode, build_gantt_layout, timeline_header
from src.utils.date_utils import today
from src.utils.error_handler import APIError, ValidationError, handle_error
from src.utils.formatters import (
    format_date_br,
    format_delay,
    format_percent,
    initials,
    responsible_label,
    shorten_name,
)
from src.utils.logger import logger

app = FastAPI(title="Schedule Dashboard")

_session: Optional[DashboardSession] = None


def get_session() -> DashboardSession:
    """Application session, created on first use"""
    global _session
    if _session is None:
        logger.info("[Web] Creating dashboard session")
        _session = DashboardSession()
    return _session


class GanttRequest(BaseModel):
    """Events to lay out on the chart"""
    events: List[Event] = []
    reference_date: Optional[date] = None
    view_mode: ViewMode = ViewMode.MONTH
    zoom: float = ZOOM_DEFAULT


def task_row(task: Task, use_end_date: bool = False) -> dict:
    """Task as displayed in the schedule/progress tables"""
    status = task_status(task, use_end_date=use_end_date)
    row = task.model_dump(mode="json")
    row.update({
        "status": status.value,
        "status_label": status_badge_label(status),
        "responsible_short": shorten_name(task.responsible_name),
        "responsible_label": responsible_label(task.responsible_name),
        "start_label": format_date_br(task.start_date),
        "end_label": format_date_br(task.end_date),
        "delay_label": format_delay(task.delay_days),
        "completion_label": format_percent(task.completion_pct),
    })
    return row


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    return JSONResponse(status_code=502, content={"success": False, **handle_error(exc).model_dump()})


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"success": False, **handle_error(exc).model_dump()})


@app.on_event("shutdown")
async def shutdown():
    """Close the backend client"""
    if _session is not None:
        await _session.close()


@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}


@app.get("/api/timeline")
async def get_timeline(
    reference_date: Optional[date] = None,
    view_mode: ViewMode = ViewMode.MONTH,
):
    """Columns of the Gantt chart"""
    reference = reference_date or today()
    layout = build_gantt_layout([], reference, view_mode)
    return {
        "view_mode": layout.view_mode.value,
        "column_width_px": layout.column_width_px,
        "days": timeline_header(layout.timeline, reference),
    }


@app.post("/api/gantt/layout")
async def gantt_layout(body: GanttRequest):
    """Position posted events on the chart"""
    reference = body.reference_date or today()
    layout = build_gantt_layout(body.events, reference, body.view_mode, body.zoom)
    result = layout.model_dump(mode="json")
    result["header"] = timeline_header(layout.timeline, reference)
    return result


@app.get("/api/files")
async def list_files(session: DashboardSession = Depends(get_session)):
    """Backend schedule files, registered locally"""
    files = await session.client.list_files()
    session.spreadsheets.sync_files(files)
    return {"files": [f.model_dump(mode="json") | {"label": f.label} for f in files]}


@app.get("/api/schedule/{file_id}")
async def get_schedule(
    file_id: str,
    classification: List[str] = Query(default=[]),
    category: List[str] = Query(default=[]),
    condition: Optional[str] = None,
    phase: List[str] = Query(default=[]),
    status: Optional[str] = None,
    session: DashboardSession = Depends(get_session),
):
    """Filtered schedule table with counters and filter options"""
    tasks = await session.schedule.load_tasks(file_id)
    filters = ScheduleFilters(
        classification=classification,
        category=category,
        condition=condition,
        phase=phase,
        status=status,
    )
    return {
        "file_id": file_id,
        "tasks": [task_row(task) for task in session.schedule.filtered(filters, tasks)],
        "counters": session.schedule.counters(tasks).model_dump(),
        "options": {
            "classification": classification_options(tasks),
            "category": category_options(tasks),
            "phase": phase_options(tasks),
        },
    }


@app.post("/api/schedule/{file_id}/tasks/{task_id}/start")
async def start_task(file_id: str, task_id: str, session: DashboardSession = Depends(get_session)):
    tasks = await session.schedule.start_task(file_id, task_id)
    return {"success": True, "tasks": [task_row(task) for task in tasks]}


@app.post("/api/schedule/{file_id}/tasks/{task_id}/unstart")
async def unstart_task(file_id: str, task_id: str, session: DashboardSession = Depends(get_session)):
    tasks = await session.schedule.unstart_task(file_id, task_id)
    return {"success": True, "tasks": [task_row(task) for task in tasks]}


@app.put("/api/schedule/{file_id}/tasks")
async def save_task(file_id: str, task: Task, session: DashboardSession = Depends(get_session)):
    tasks = await session.schedule.save_task(file_id, task)
    return {"success": True, "tasks": [task_row(t) for t in tasks]}


@app.delete("/api/schedule/{file_id}/tasks/{task_id}")
async def delete_task(file_id: str, task_id: str, session: DashboardSession = Depends(get_session)):
    tasks = await session.schedule.delete_task(file_id, task_id)
    return {"success": True, "tasks": [task_row(task) for task in tasks]}


@app.get("/api/employees")
async def list_employees(session: DashboardSession = Depends(get_session)):
    employees = await session.progress.get_employees()
    projects = await session.progress.get_project_options()
    return {
        "employees": [e.model_dump() for e in employees],
        "projects": [p.model_dump() for p in projects],
    }


@app.get("/api/employees/{employee_id}/progress")
async def employee_progress(
    employee_id: str,
    project_id: str = ALL_PROJECTS_ID,
    status: Optional[str] = None,
    session: DashboardSession = Depends(get_session),
):
    """Tasks of one employee with status counters"""
    tasks = await session.progress.load_tasks(employee_id, project_id)
    return {
        "tasks": [task_row(task, use_end_date=True) for task in session.progress.filtered(status, tasks=tasks)],
        "counters": session.progress.counters(tasks=tasks).model_dump(),
    }


@app.get("/api/progress/{project_id}")
async def project_progress(project_id: str, session: DashboardSession = Depends(get_session)):
    progress = await session.progress.get_project_progress(project_id)
    return progress.model_dump() | {"completion_rate": progress.completion_rate}


@app.get("/api/team")
async def team(session: DashboardSession = Depends(get_session)):
    overview = await session.team.get_overview()
    members = [
        member.model_dump(mode="json") | {"initials": initials(member.name)}
        for member in overview.members
    ]
    return overview.model_dump(mode="json") | {
        "members": members,
        "active_count": overview.active_count,
        "tasks_completed": overview.tasks_completed,
    }


@app.get("/api/calendar/gantt")
async def calendar_gantt(
    reference_date: Optional[date] = None,
    view_mode: ViewMode = ViewMode.MONTH,
    zoom: float = ZOOM_DEFAULT,
    session: DashboardSession = Depends(get_session),
):
    """Gantt chart of the logged-in user's tasks"""
    events = await session.calendar.load_events()
    reference = reference_date or session.calendar.reference_date
    layout = build_gantt_layout(events, reference, view_mode, zoom)
    result = layout.model_dump(mode="json")
    result["header"] = timeline_header(layout.timeline, reference)
    return result


@app.get("/api/notifications")
async def list_notifications(session: DashboardSession = Depends(get_session)):
    center = session.notifications
    return {
        "notifications": [n.model_dump(mode="json") for n in center.notifications],
        "unread_count": center.unread_count,
        "settings": center.settings.model_dump(),
    }


@app.post("/api/notifications/{notification_id}/read")
async def mark_notification_read(notification_id: str, session: DashboardSession = Depends(get_session)):
    session.notifications.mark_as_read(notification_id)
    return {"success": True, "unread_count": session.notifications.unread_count}


@app.post("/api/notifications/read-all")
async def mark_all_notifications_read(session: DashboardSession = Depends(get_session)):
    session.notifications.mark_all_as_read()
    return {"success": True, "unread_count": 0}


@app.delete("/api/notifications/{notification_id}")
async def clear_notification(notification_id: str, session: DashboardSession = Depends(get_session)):
    session.notifications.clear(notification_id)
    return {"success": True}


@app.get("/api/spreadsheets/{spreadsheet_id}/export", response_class=PlainTextResponse)
async def export_spreadsheet(spreadsheet_id: str, session: DashboardSession = Depends(get_session)):
    content = session.spreadsheets.export_csv(spreadsheet_id)
    if content is None:
        raise ValidationError("Planilha não encontrada ou vazia.")
    return PlainTextResponse(content, media_type="text/csv; charset=utf-8")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.WEB_PORT)
