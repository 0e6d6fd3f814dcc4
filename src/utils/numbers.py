"""
Numeric coercion helpers for task fields

Backend payloads and spreadsheet cells carry durations like "5 dias" and
completion either as a 0..1 fraction or a 0..100 percentage. These helpers
never raise: malformed input falls back to a safe default.
"""

import math
import re
from typing import Any, Optional
from src.config.constants import TASK_DEFAULT_DURATION, TASK_DEFAULT_PROGRESS, TASK_MAX_DURATION

_NON_DIGITS = re.compile(r"\D+")


def to_float(value: Any) -> Optional[float]:
    """
    Convert value to a finite float
    
    Returns:
        Float or None for empty, non-numeric, NaN or infinite values
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace("%", "").replace(",", ".")
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def round_half_up(value: float) -> int:
    """Round like Math.round (halves go up)"""
    return int(math.floor(value + 0.5))


def clamp_percent(value: Any) -> int:
    """
    Clamp a percentage typed in the edit form to [0, 100]
    
    Args:
        value: Raw value (number or string)
        
    Returns:
        Integer percentage within [0, 100]
    """
    number = to_float(value)
    if number is None:
        return TASK_DEFAULT_PROGRESS
    return max(0, min(100, round_half_up(number)))


def parse_progress(value: Any) -> int:
    """
    Normalize completion to a 0..100 percentage
    
    Values up to 1 are fractions (0.5 -> 50); larger values are already
    percentages.
    
    Args:
        value: Completion as fraction, percentage or string
        
    Returns:
        Integer percentage within [0, 100]
    """
    number = to_float(value)
    if number is None:
        return TASK_DEFAULT_PROGRESS
    if number <= 1:
        return round_half_up(max(0.0, min(1.0, number)) * 100)
    return round_half_up(max(0.0, min(100.0, number)))


def parse_duration_days(value: Any) -> int:
    """
    Parse a duration in days
    
    Numbers are floored; strings keep only their digits ("5 dias" -> 5).
    Results are capped at TASK_MAX_DURATION.
    
    Args:
        value: Duration as number or text
        
    Returns:
        Duration in days, between 1 and TASK_MAX_DURATION
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if math.isfinite(value):
            return max(TASK_DEFAULT_DURATION, min(TASK_MAX_DURATION, int(math.floor(value))))
        return TASK_DEFAULT_DURATION
    if not value:
        return TASK_DEFAULT_DURATION
    digits = _NON_DIGITS.sub("", str(value)).lstrip("0")
    if not digits:
        return TASK_DEFAULT_DURATION
    if len(digits) > len(str(TASK_MAX_DURATION)):
        return TASK_MAX_DURATION
    return min(TASK_MAX_DURATION, int(digits))


def parse_int(value: Any, default: int = 0) -> int:
    """Integer value of a number-like field, default when malformed"""
    number = to_float(value)
    if number is None:
        return default
    return int(number)
