"""
Date parsing utilities for backend payload values
"""

from datetime import date, datetime
from email.utils import parsedate_to_datetime
from typing import Any, Optional


# Formats seen in backend payloads and spreadsheet cells
_DATE_FORMATS = [
    "%Y-%m-%d %H:%M:%S",  # 2025-11-08 10:00:00 (SQL)
    "%Y-%m-%d %H:%M",     # 2025-11-08 10:00
    "%Y-%m-%d",           # 2025-11-08
    "%d/%m/%Y %H:%M",     # 08/11/2025 10:00
    "%d/%m/%Y",           # 08/11/2025
    "%d.%m.%Y",           # 08.11.2025
]


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a backend date value into a naive datetime
    
    Accepts ISO 8601, SQL timestamps, RFC 1123 strings
    (e.g., "Tue, 05 Nov 2024 00:00:00 GMT") and dd/mm/yyyy. Timezone-aware
    values keep their wall-clock time; the offset is discarded so dates
    sent as midnight GMT stay on the same calendar day.
    
    Args:
        value: Date string, date or datetime
        
    Returns:
        Naive datetime or None if the value is empty or unparseable
    """
    if value is None:
        return None
    
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    
    if not isinstance(value, str):
        return None
    
    date_str = value.strip()
    if not date_str:
        return None
    
    # ISO format (with or without timezone)
    try:
        return datetime.fromisoformat(date_str.replace("Z", "+00:00")).replace(tzinfo=None)
    except ValueError:
        pass
    
    # RFC 1123, as serialized by Flask's jsonify
    if "," in date_str:
        try:
            return parsedate_to_datetime(date_str).replace(tzinfo=None)
        except (TypeError, ValueError, IndexError):
            pass
    
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(date_str, fmt)
        except ValueError:
            continue
    
    # If can't parse, return None
    return None
