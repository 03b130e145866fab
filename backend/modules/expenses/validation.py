"""
Recurring expense form validation and record building.

The same rules apply to create and update. Validation runs before any
remote write; a failure raises ExpenseValidationError with the message the
editor shows to the user.
"""

import math
import re
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from .exceptions import ExpenseValidationError
from .models import WEEKDAYS, Frequency, RecurringExpenseDraft, Weekday

MIN_DAY = 1
MAX_DAY = 31
MIN_MONTH = 0
MAX_MONTH = 11

_INTEGER = re.compile(r"-?[0-9]+")


def parse_amount(value: Any) -> Optional[Decimal]:
    """Parse an entered amount; None if blank, malformed or not a finite float."""
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return None
    if not amount.is_finite() or not math.isfinite(float(amount)):
        return None
    return amount


def parse_day(value: Any) -> Optional[int]:
    """Parse an entered day-of-month; None if blank or not an integer."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)


def _in_range(value: Optional[int], low: int, high: int) -> bool:
    return value is not None and low <= value <= high


def validate_draft(draft: RecurringExpenseDraft) -> None:
    """
    Check a draft before it is saved.

    Raises:
        ExpenseValidationError: On the first failing rule
    """
    if not draft.label.strip():
        raise ExpenseValidationError("Enter a label", field="label")

    if parse_amount(draft.amount) is None:
        raise ExpenseValidationError("Enter a valid amount", field="amount")

    if draft.frequency == Frequency.MONTHLY:
        if not _in_range(parse_day(draft.monthly_day), MIN_DAY, MAX_DAY):
            raise ExpenseValidationError("Monthly day must be 1-31", field="monthly_day")

    if draft.frequency == Frequency.YEARLY:
        if not _in_range(parse_day(draft.yearly_day), MIN_DAY, MAX_DAY):
            raise ExpenseValidationError("Yearly day must be 1-31", field="yearly_day")
        if not _in_range(draft.yearly_month, MIN_MONTH, MAX_MONTH):
            raise ExpenseValidationError("Yearly month must be 0-11", field="yearly_month")

    if draft.end_date is not None and draft.end_date <= draft.start_date:
        raise ExpenseValidationError("End date must be after start date", field="end_date")


def normalize_weekdays(days: list[Weekday]) -> list[Weekday]:
    """Deduplicate and order weekdays Sunday first."""
    return sorted(set(days), key=WEEKDAYS.index)


def build_record(
    draft: RecurringExpenseDraft,
    user_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    """
    Validate a draft and build the row payload to write.

    Only the rule fields of the selected frequency are populated; the rest
    are forced to None, even if the draft still carries input from another
    frequency tab. Passing `user_id` marks the payload as a create and stamps
    `created_at`; updates only stamp `updated_at`.

    Raises:
        ExpenseValidationError: If the draft is invalid
    """
    validate_draft(draft)

    stamp = (now or datetime.now(timezone.utc)).isoformat()
    frequency = draft.frequency

    record: dict[str, Any] = {
        "label": draft.label.strip(),
        "amount": float(parse_amount(draft.amount)),
        "frequency": frequency.value,
        "start_date": draft.start_date.isoformat(),
        "end_date": draft.end_date.isoformat() if draft.end_date else None,
        "weekly_days": None,
        "monthly_day": None,
        "yearly_month": None,
        "yearly_day": None,
        "updated_at": stamp,
    }

    if frequency == Frequency.WEEKLY:
        record["weekly_days"] = [d.value for d in normalize_weekdays(draft.weekly_days)]
    elif frequency == Frequency.MONTHLY:
        record["monthly_day"] = parse_day(draft.monthly_day)
    elif frequency == Frequency.YEARLY:
        record["yearly_month"] = draft.yearly_month
        record["yearly_day"] = parse_day(draft.yearly_day)

    if user_id is not None:
        record["user_id"] = user_id
        record["created_at"] = stamp

    return record
