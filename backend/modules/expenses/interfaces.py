"""
Recurring expense module interface.
"""

from datetime import date, datetime
from typing import Optional, Protocol, runtime_checkable

from .models import (
    MonthlyExpenseListResponse,
    MonthlyExpenseSummary,
    RecurringExpense,
    RecurringExpenseDraft,
    RecurringExpenseListResponse,
)


@runtime_checkable
class IExpenseService(Protocol):
    """Interface for recurring expense operations."""

    async def create_expense(
        self,
        user_id: str,
        draft: RecurringExpenseDraft,
        now: Optional[datetime] = None,
    ) -> RecurringExpense:
        """
        Validate and insert a new recurring expense.

        Raises:
            ExpenseValidationError: If the draft is invalid
        """
        ...

    async def update_expense(
        self,
        user_id: str,
        expense_id: int,
        draft: RecurringExpenseDraft,
        now: Optional[datetime] = None,
    ) -> RecurringExpense:
        """
        Validate and overwrite an existing expense (last write wins).

        Raises:
            ExpenseValidationError: If the draft is invalid
            ExpenseNotFoundError: If the expense doesn't exist
            ExpenseAccessDeniedError: If the user doesn't own the expense
        """
        ...

    async def delete_expense(self, user_id: str, expense_id: int) -> None:
        """
        Permanently delete an expense.

        Raises:
            ExpenseNotFoundError: If the expense doesn't exist
            ExpenseAccessDeniedError: If the user doesn't own the expense
        """
        ...

    async def list_expenses(
        self,
        user_id: str,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> RecurringExpenseListResponse:
        """List a user's expenses, newest first."""
        ...

    async def list_for_month(
        self,
        user_id: str,
        month: str,
        year: int,
        page: int = 1,
        today: Optional[date] = None,
    ) -> MonthlyExpenseListResponse:
        """List the expenses that charge within a month, with their status."""
        ...

    async def get_monthly_summary(
        self,
        user_id: str,
        month: str,
        year: int,
    ) -> MonthlyExpenseSummary:
        """Manual plus recurring expenses for a month."""
        ...
