"""
Centralized date utilities for the schedule views
All "today" computations go through this module so the configured
timezone is honoured everywhere
"""

import calendar
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from src.config.settings import settings
from src.utils.logger import logger

DateLike = Union[date, datetime]


def get_timezone(tz_name: Optional[str] = None):
    """
    Resolve timezone by IANA name, falling back to the configured default
    
    Args:
        tz_name: IANA timezone name (e.g., "America/Sao_Paulo")
        
    Returns:
        tzinfo object
    """
    name = tz_name or settings.DEFAULT_TIMEZONE
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone '{name}', using UTC")
        return ZoneInfo("UTC")


def get_current_datetime(tz_name: Optional[str] = None) -> datetime:
    """
    Get current naive datetime as seen in the given timezone
    
    Returns:
        Current wall-clock datetime without tzinfo
    """
    return datetime.now(get_timezone(tz_name)).replace(tzinfo=None)


def today(tz_name: Optional[str] = None) -> date:
    """Current calendar day in the configured timezone"""
    return get_current_datetime(tz_name).date()


def as_date(value: DateLike) -> date:
    """Drop the time part of a datetime; dates pass through"""
    if isinstance(value, datetime):
        return value.date()
    return value


def start_of_day(value: DateLike) -> datetime:
    """Midnight of the given day"""
    day = as_date(value)
    return datetime(day.year, day.month, day.day)


def days_between(start: DateLike, end: DateLike) -> int:
    """
    Whole calendar days from start to end (negative when end is earlier)
    
    Args:
        start: First day
        end: Second day
        
    Returns:
        Number of days
    """
    return (as_date(end) - as_date(start)).days


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month"""
    return calendar.monthrange(year, month)[1]


def add_days(value: DateLike, days: int) -> date:
    """Shift a day by a number of days, saturating at date.min/date.max"""
    try:
        return as_date(value) + timedelta(days=days)
    except OverflowError:
        return date.max if days > 0 else date.min


def shift_datetime(value: datetime, days: int) -> datetime:
    """Shift a moment by a number of days, saturating at datetime.min/datetime.max"""
    try:
        return value + timedelta(days=days)
    except OverflowError:
        return datetime.max if days > 0 else datetime.min


def add_months(value: DateLike, months: int) -> date:
    """
    Shift a day by whole calendar months
    
    The day of month is clamped to the target month length
    (e.g., Jan 31 + 1 month -> Feb 28/29)
    """
    day = as_date(value)
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    if year > MAXYEAR:
        return date.max
    if year < MINYEAR:
        return date.min
    return date(year, month, min(day.day, days_in_month(year, month)))
