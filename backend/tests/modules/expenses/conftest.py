"""Fixtures for recurring expense tests."""

from datetime import date, datetime, timezone
from decimal import Decimal

from modules.expenses.models import Frequency, RecurringExpense


def make_expense(**overrides) -> RecurringExpense:
    data = {
        "id": 1,
        "user_id": "test-user-123",
        "label": "Chair rent",
        "amount": Decimal("100"),
        "frequency": Frequency.MONTHLY,
        "start_date": date(2025, 1, 1),
        "end_date": None,
        "weekly_days": None,
        "monthly_day": 1,
        "yearly_month": None,
        "yearly_day": None,
        "created_at": datetime(2025, 1, 1, tzinfo=timezone.utc),
        "updated_at": datetime(2025, 1, 1, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return RecurringExpense(**data)


def expense_row(**overrides) -> dict:
    """A `recurring_expenses` row as Supabase returns it."""
    return make_expense(**overrides).model_dump(mode="json")
