"""
Gantt timeline generation and bar positioning
"""

from enum import Enum
from datetime import date
from typing import Any, Dict, List, Optional, Sequence
from pydantic import BaseModel
from src.config.constants import (
    MIN_BAR_WIDTH,
    MONTH_COLUMN_WIDTH,
    WEEK_COLUMN_WIDTH,
    WEEK_DAYS_AFTER,
    WEEK_DAYS_BEFORE,
    ZOOM_DEFAULT,
    ZOOM_MAX,
    ZOOM_MIN,
    ZOOM_STEP,
)
from src.models.event import Event
from src.utils.date_parser import parse_date
from src.utils.date_utils import DateLike, add_days, add_months, as_date, days_between, days_in_month, today
from src.utils.numbers import clamp_percent, parse_duration_days, to_float


class ViewMode(str, Enum):
    """Gantt view modes"""
    WEEK = "week"
    MONTH = "month"


class Direction(str, Enum):
    """Navigation / zoom direction"""
    PREV = "prev"
    NEXT = "next"
    IN = "in"
    OUT = "out"


class BarPosition(BaseModel):
    """Horizontal placement of a Gantt bar, in pixels"""

    left_px: float = 0.0
    width_px: float = 0.0


class GanttRow(BaseModel):
    """One event row of the Gantt chart"""

    event: Event
    position: BarPosition
    progress_px: float
    end_date: date


class GanttLayout(BaseModel):
    """Everything needed to draw the chart"""

    view_mode: ViewMode
    zoom: float
    column_width_px: float
    timeline: List[date]
    rows: List[GanttRow]


def generate_timeline(reference_date: DateLike, view_mode: ViewMode) -> List[date]:
    """
    Days rendered as the chart columns

    Week mode spans 7 days before to 7 days after the reference date
    (15 days). Month mode spans the whole calendar month of the reference
    date. Recomputed on every call.

    Args:
        reference_date: Date the view is anchored on
        view_mode: Week or month

    Returns:
        Ascending list of consecutive days
    """
    day = as_date(reference_date)

    if ViewMode(view_mode) == ViewMode.WEEK:
        first = add_days(day, -WEEK_DAYS_BEFORE)
        count = WEEK_DAYS_BEFORE + WEEK_DAYS_AFTER + 1
    else:
        first = day.replace(day=1)
        count = days_in_month(day.year, day.month)

    return [add_days(first, offset) for offset in range(count)]


def shift_reference(reference_date: DateLike, direction: Direction, view_mode: ViewMode) -> date:
    """
    Move the reference date one page back or forward

    Month mode moves one calendar month, week mode 7 days.
    """
    step = -1 if Direction(direction) == Direction.PREV else 1
    if ViewMode(view_mode) == ViewMode.WEEK:
        return add_days(reference_date, 7 * step)
    return add_months(reference_date, step)


def column_width(view_mode: ViewMode) -> int:
    """Day column width: wider in week view to show more detail"""
    if ViewMode(view_mode) == ViewMode.WEEK:
        return WEEK_COLUMN_WIDTH
    return MONTH_COLUMN_WIDTH


def clamp_zoom(zoom: Any) -> float:
    """Keep zoom factor within [ZOOM_MIN, ZOOM_MAX]"""
    value = to_float(zoom)
    if value is None:
        return ZOOM_DEFAULT
    return max(ZOOM_MIN, min(ZOOM_MAX, value))


def apply_zoom(current: float, direction: Direction) -> float:
    """Zoom in (x1.2) or out (/1.2), clamped"""
    current = clamp_zoom(current)
    if Direction(direction) == Direction.IN:
        return clamp_zoom(current * ZOOM_STEP)
    return clamp_zoom(current / ZOOM_STEP)


def compute_bar_position(
    task_start: Any,
    duration_days: Any,
    timeline_first_day: Optional[DateLike],
    column_width_px: float,
    zoom_factor: float,
) -> BarPosition:
    """
    Pixel offset and width of a task bar

    left  = max(0, days(first_day -> start) * column_width * zoom)
    width = max(MIN_BAR_WIDTH, duration * column_width * zoom)

    Tasks starting before the timeline are pinned to the left edge. An
    invalid start falls back to today and an invalid duration to one day.

    Args:
        task_start: Task start (date, datetime or parseable string)
        duration_days: Task duration in days
        timeline_first_day: First rendered day, None for an empty timeline
        column_width_px: Width of one day column
        zoom_factor: Zoom factor, already clamped by the caller

    Returns:
        BarPosition (zero-sized when the timeline is empty)
    """
    if timeline_first_day is None:
        return BarPosition()

    start = parse_date(task_start) or today()
    duration = parse_duration_days(duration_days)
    scale = column_width_px * zoom_factor

    offset = days_between(timeline_first_day, start) * scale
    return BarPosition(
        left_px=max(0.0, offset),
        width_px=max(float(MIN_BAR_WIDTH), duration * scale),
    )


def progress_width(position: BarPosition, progress_pct: Any) -> float:
    """Width of the filled (completed) part of a bar"""
    return position.width_px * clamp_percent(progress_pct or 0) / 100


def event_end_date(event: Event) -> date:
    """Last day covered by an event (inclusive)"""
    duration = event.duration or 1
    return add_days(event.date, duration - 1)


def build_gantt_layout(
    events: Sequence[Event],
    reference_date: DateLike,
    view_mode: ViewMode = ViewMode.MONTH,
    zoom: float = ZOOM_DEFAULT,
) -> GanttLayout:
    """
    Compute the full chart: columns plus one positioned row per event

    Args:
        events: Events to draw, in display order
        reference_date: Date the view is anchored on
        view_mode: Week or month
        zoom: Requested zoom factor (clamped)

    Returns:
        GanttLayout
    """
    view_mode = ViewMode(view_mode)
    zoom = clamp_zoom(zoom)
    width = column_width(view_mode)
    timeline = generate_timeline(reference_date, view_mode)
    first_day = timeline[0] if timeline else None

    rows = []
    for event in events:
        position = compute_bar_position(event.date, event.duration, first_day, width, zoom)
        rows.append(GanttRow(
            event=event,
            position=position,
            progress_px=progress_width(position, event.progress),
            end_date=event_end_date(event),
        ))

    return GanttLayout(
        view_mode=view_mode,
        zoom=zoom,
        column_width_px=width,
        timeline=timeline,
        rows=rows,
    )


def timeline_header(timeline: Sequence[date], reference_date: DateLike, current_day: Optional[date] = None) -> List[Dict[str, Any]]:
    """Header cells: day number, weekday, today / current month flags"""
    reference = as_date(reference_date)
    current_day = current_day or today()
    weekdays = ["seg", "ter", "qua", "qui", "sex", "sáb", "dom"]
    return [
        {
            "date": day.isoformat(),
            "day": day.day,
            "weekday": weekdays[day.weekday()],
            "is_today": day == current_day,
            "is_current_month": day.month == reference.month,
        }
        for day in timeline
    ]
