"""
Read-only occurrence arithmetic for recurring expense rules.

Nothing here is persisted or scheduled: occurrences are computed on demand
to show monthly totals and the "last added / next pending" status in the
finances view. Every occurrence must fall inside the rule's
[start_date, end_date] window; monthly and yearly days past the end of a
short month produce no occurrence in that month.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from shared.dates import days_in_month

from .models import ExpenseStatus, Frequency, MonthlyExpenseItem, RecurringExpense, Weekday


def _in_window(expense: RecurringExpense, day: date) -> bool:
    if day < expense.start_date:
        return False
    return expense.end_date is None or day <= expense.end_date


def _overlaps_month(expense: RecurringExpense, year: int, month_idx: int) -> bool:
    month_start = date(year, month_idx + 1, 1)
    month_end = date(year, month_idx + 1, days_in_month(year, month_idx))
    if expense.start_date > month_end:
        return False
    return expense.end_date is None or expense.end_date >= month_start


def occurrences_in_month(expense: RecurringExpense, year: int, month_idx: int) -> list[date]:
    """
    Dates on which the rule charges within a month, in ascending order.

    Args:
        expense: The recurring expense rule
        year: Calendar year
        month_idx: 0-based month index
    """
    if not _overlaps_month(expense, year, month_idx):
        return []

    last_day = days_in_month(year, month_idx)
    frequency = expense.frequency

    if frequency == Frequency.ONCE:
        start = expense.start_date
        if start.year == year and start.month == month_idx + 1:
            return [start]
        return []

    if frequency == Frequency.WEEKLY:
        days = set(expense.weekly_days or [])
        if not days:
            return []
        candidates = (date(year, month_idx + 1, d) for d in range(1, last_day + 1))
        return [d for d in candidates if Weekday.of(d) in days and _in_window(expense, d)]

    if frequency == Frequency.MONTHLY:
        day = expense.monthly_day
    elif expense.yearly_month == month_idx:
        day = expense.yearly_day
    else:
        day = None

    if not day or day > last_day:
        return []
    occurrence = date(year, month_idx + 1, day)
    return [occurrence] if _in_window(expense, occurrence) else []


def expense_status(
    expense: RecurringExpense,
    year: int,
    month_idx: int,
    today: Optional[date] = None,
) -> ExpenseStatus:
    """Latest occurrence on or before `today` and earliest one after it."""
    today = today or date.today()
    occurrences = occurrences_in_month(expense, year, month_idx)

    past = [d for d in occurrences if d <= today]
    future = [d for d in occurrences if d > today]
    return ExpenseStatus(
        last_added=max(past) if past else None,
        next_pending=min(future) if future else None,
    )


def expenses_for_month(
    expenses: Iterable[RecurringExpense],
    year: int,
    month_idx: int,
) -> list[RecurringExpense]:
    """Expenses that charge at least once in the month, preserving order."""
    return [e for e in expenses if occurrences_in_month(e, year, month_idx)]


def month_item(
    expense: RecurringExpense,
    year: int,
    month_idx: int,
    today: Optional[date] = None,
) -> MonthlyExpenseItem:
    """
    Decorate an expense with its month status and edit locks.

    A one-off expense that has already been charged can no longer be edited;
    a recurring rule that has charged this month keeps its amount locked.
    """
    status = expense_status(expense, year, month_idx, today)
    charged = status.last_added is not None
    once = expense.frequency == Frequency.ONCE
    return MonthlyExpenseItem(
        expense=expense,
        status=status,
        occurrences=len(occurrences_in_month(expense, year, month_idx)),
        can_edit=not charged if once else True,
        amount_locked=charged and not once,
    )


def recurring_total_for_month(
    expenses: Iterable[RecurringExpense],
    year: int,
    month_idx: int,
) -> Decimal:
    """Sum of amount times occurrence count across all rules."""
    total = Decimal("0")
    for expense in expenses:
        count = len(occurrences_in_month(expense, year, month_idx))
        total += expense.amount * count
    return total
