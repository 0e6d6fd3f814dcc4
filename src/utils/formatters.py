"""
Display formatting utilities
"""

from typing import Any, Optional
from src.config.constants import DATE_FORMAT_BR, EMPTY_VALUE, NOT_DEFINED_LABEL, SURNAME_PARTICLES
from src.utils.date_parser import parse_date


def shorten_name(full_name: Optional[str]) -> str:
    """
    Abbreviate a responsible person's name for compact display

    Surname particles ("da", "dos", "van", ...) are skipped when picking
    the surname initials. A single initial is used only when one surname
    remains; two surnames with the same initial still give "S. S.".

    Examples:
        "Maria da Silva Santos" -> "Maria S. S."
        "João Pereira" -> "João P."
        "Ana" -> "Ana"

    Args:
        full_name: Full name

    Returns:
        "First F. L." form, the single token unchanged, or "" for blank input
    """
    if not full_name or not full_name.strip():
        return ""

    tokens = full_name.split()
    if len(tokens) == 1:
        return tokens[0]

    first_name = tokens[0]
    surnames = [t for t in tokens[1:] if t.lower() not in SURNAME_PARTICLES]
    if not surnames:
        return first_name

    first_initial = surnames[0][0].upper()
    if len(surnames) == 1:
        return f"{first_name} {first_initial}."

    last_initial = surnames[-1][0].upper()
    return f"{first_name} {first_initial}. {last_initial}."


def responsible_label(full_name: Optional[str]) -> str:
    """Short responsible name, or the "not defined" label"""
    return shorten_name(full_name) or NOT_DEFINED_LABEL


def initials(name: Optional[str], limit: int = 3) -> str:
    """Avatar initials ("Maria da Silva" -> "MDS")"""
    if not name:
        return ""
    return "".join(part[0] for part in name.split()).upper()[:limit]


def format_date_br(value: Any) -> str:
    """
    Format a date as dd/mm/yyyy

    Args:
        value: Date, datetime or parseable string

    Returns:
        Formatted date or "—" when absent or invalid
    """
    parsed = parse_date(value)
    if parsed is None:
        return EMPTY_VALUE
    return parsed.strftime(DATE_FORMAT_BR)


def format_percent(value: Optional[int]) -> str:
    """Completion percentage for the table ("45%")"""
    if value is None:
        return EMPTY_VALUE
    return f"{value}%"


def format_delay(delay_days: int) -> str:
    """Delay note shown under the overdue badge"""
    if delay_days <= 0:
        return ""
    suffix = "s" if delay_days > 1 else ""
    return f"Atraso: {delay_days} dia{suffix}"
