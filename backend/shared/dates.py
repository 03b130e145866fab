"""
Calendar helpers shared by the finance and dashboard modules.

Month names match the `month` column of `monthly_data` ("January", ...).
Month indexes are 0-based throughout, matching `recurring_expenses.yearly_month`.
"""

import calendar
from datetime import date, datetime
from typing import Any, Optional

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def month_index(month_name: str) -> int:
    """0-based index of a month name; raises ValueError for unknown names."""
    try:
        return MONTH_NAMES.index(month_name.strip().capitalize())
    except ValueError:
        raise ValueError(f"Unknown month: {month_name!r}") from None


def days_in_month(year: int, month_idx: int) -> int:
    return calendar.monthrange(year, month_idx + 1)[1]


def previous_month(month_name: str, year: int) -> tuple[str, int]:
    """The month before `month_name`/`year`, rolling back across January."""
    idx = month_index(month_name) - 1
    if idx < 0:
        return MONTH_NAMES[11], year - 1
    return MONTH_NAMES[idx], year


def parse_ymd(value: Any) -> Optional[date]:
    """
    Parse a stored date ("2025-01-31", "2025-01-31T00:00:00Z", date, datetime).

    Only the calendar date is kept, so a UTC timestamp never shifts a day.
    Returns None for empty or unparseable input.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    normalized = value.strip().split("T")[0].split(" ")[0]
    try:
        return date.fromisoformat(normalized)
    except ValueError:
        return None
