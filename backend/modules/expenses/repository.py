"""
Recurring expense repository for database access.

Encapsulates all Supabase queries for:
- recurring_expenses
- monthly_data (manual monthly expense totals)
"""

from decimal import Decimal
from typing import Any, Optional

from shared.repository import BaseRepository

from .models import RecurringExpense, RecurringExpenseListResponse

TABLE = "recurring_expenses"


class ExpenseRepository(BaseRepository[RecurringExpense]):
    """
    Repository for recurring expense data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying user ownership.
    """

    def get_by_id(self, expense_id: int) -> Optional[RecurringExpense]:
        result = self._db.table(TABLE).select("*").eq("id", expense_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return RecurringExpense.model_validate(row)

    def list_for_user(self, user_id: str) -> list[RecurringExpense]:
        """All of a user's expenses, newest first."""
        result = (
            self._db.table(TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [RecurringExpense.model_validate(row) for row in result.data or []]

    def list_page(
        self,
        user_id: str,
        page: int = 1,
        page_size: int = 10,
    ) -> RecurringExpenseListResponse:
        """
        One page of a user's expenses, newest first.

        Issues one exact-count query followed by one range query.
        """
        offset = (page - 1) * page_size

        count_result = (
            self._db.table(TABLE)
            .select("id", count="exact")
            .eq("user_id", user_id)
            .execute()
        )
        total = count_result.count or 0

        result = (
            self._db.table(TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .range(offset, offset + page_size - 1)
            .execute()
        )

        return RecurringExpenseListResponse(
            expenses=[RecurringExpense.model_validate(row) for row in result.data or []],
            total=total,
            page=page,
            page_size=page_size,
            has_more=(offset + page_size) < total,
        )

    def insert(self, data: dict[str, Any]) -> RecurringExpense:
        result = self._db.table(TABLE).insert(data).execute()
        return RecurringExpense.model_validate(result.data[0])

    def update(self, expense_id: int, data: dict[str, Any]) -> Optional[RecurringExpense]:
        """Full-record update; returns None if the row vanished meanwhile."""
        result = self._db.table(TABLE).update(data).eq("id", expense_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return RecurringExpense.model_validate(row)

    def delete(self, expense_id: int) -> None:
        self._db.table(TABLE).delete().eq("id", expense_id).execute()

    def get_manual_expenses(self, user_id: str, month: str, year: int) -> Decimal:
        """The manually entered `monthly_data.expenses` total, 0 if none."""
        result = (
            self._db.table("monthly_data")
            .select("expenses")
            .eq("user_id", user_id)
            .eq("month", month)
            .eq("year", year)
            .limit(1)
            .execute()
        )
        row = self._first(result.data)
        if row is None or row.get("expenses") is None:
            return Decimal("0")
        return Decimal(str(row["expenses"]))
