"""
Recurring expense service.

Validates editor input, enforces ownership, writes through the repository
and appends a best-effort audit row after each successful mutation.
Concurrent edits of the same row are last-write-wins; no version check.
"""

import logging
import math
from datetime import date, datetime
from typing import Optional

from modules.audit.models import AuditAction
from modules.audit.service import AuditLogService
from shared.dates import MONTH_NAMES, month_index

from .exceptions import (
    ExpenseAccessDeniedError,
    ExpenseNotFoundError,
    ExpenseValidationError,
)
from .interfaces import IExpenseService
from .models import (
    MonthlyExpenseListResponse,
    MonthlyExpenseSummary,
    RecurringExpense,
    RecurringExpenseDraft,
    RecurringExpenseListResponse,
)
from .repository import ExpenseRepository
from .schedule import expenses_for_month, month_item, recurring_total_for_month
from .validation import build_record

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10


def _month_idx(month: str) -> int:
    try:
        return month_index(month)
    except ValueError:
        raise ExpenseValidationError(f"Unknown month: {month}", field="month")


class ExpenseService(IExpenseService):
    """Recurring expense service backed by Supabase."""

    def __init__(
        self,
        repository: ExpenseRepository,
        audit: AuditLogService,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._repo = repository
        self._audit = audit
        self._page_size = page_size

    def _get_owned(self, user_id: str, expense_id: int) -> RecurringExpense:
        expense = self._repo.get_by_id(expense_id)
        if expense is None:
            raise ExpenseNotFoundError(expense_id)
        if expense.user_id != user_id:
            raise ExpenseAccessDeniedError(expense_id, user_id)
        return expense

    async def create_expense(
        self,
        user_id: str,
        draft: RecurringExpenseDraft,
        now: Optional[datetime] = None,
    ) -> RecurringExpense:
        record = build_record(draft, user_id=user_id, now=now)
        expense = self._repo.insert(record)
        logger.info("Created recurring expense %s for %s", expense.id, user_id)

        await self._audit.record(
            user_id, AuditAction.EXPENSE_ADDED, details="Recurring expense added"
        )
        return expense

    async def update_expense(
        self,
        user_id: str,
        expense_id: int,
        draft: RecurringExpenseDraft,
        now: Optional[datetime] = None,
    ) -> RecurringExpense:
        record = build_record(draft, now=now)
        self._get_owned(user_id, expense_id)

        expense = self._repo.update(expense_id, record)
        if expense is None:
            raise ExpenseNotFoundError(expense_id)
        logger.info("Updated recurring expense %s for %s", expense_id, user_id)

        await self._audit.record(
            user_id, AuditAction.EXPENSE_EDITED, details="Recurring expense edited"
        )
        return expense

    async def delete_expense(self, user_id: str, expense_id: int) -> None:
        self._get_owned(user_id, expense_id)
        self._repo.delete(expense_id)
        logger.info("Deleted recurring expense %s for %s", expense_id, user_id)

        await self._audit.record(
            user_id, AuditAction.EXPENSE_DELETED, details="Recurring expense deleted"
        )

    async def list_expenses(
        self,
        user_id: str,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> RecurringExpenseListResponse:
        return self._repo.list_page(user_id, page, page_size or self._page_size)

    async def list_for_month(
        self,
        user_id: str,
        month: str,
        year: int,
        page: int = 1,
        today: Optional[date] = None,
    ) -> MonthlyExpenseListResponse:
        """
        Month view of a user's expenses.

        Filtering happens client-side over the full list. A page past the
        end is clamped to the last page.
        """
        month_idx = _month_idx(month)
        month = MONTH_NAMES[month_idx]
        matching = expenses_for_month(self._repo.list_for_user(user_id), year, month_idx)

        total = len(matching)
        page_size = self._page_size
        last_page = max(1, math.ceil(total / page_size))
        page = min(max(1, page), last_page)
        start = (page - 1) * page_size

        items = [
            month_item(expense, year, month_idx, today)
            for expense in matching[start : start + page_size]
        ]
        return MonthlyExpenseListResponse(
            month=month,
            year=year,
            items=items,
            total=total,
            page=page,
            page_size=page_size,
            has_more=page < last_page,
        )

    async def get_monthly_summary(
        self,
        user_id: str,
        month: str,
        year: int,
    ) -> MonthlyExpenseSummary:
        month_idx = _month_idx(month)
        month = MONTH_NAMES[month_idx]
        manual = self._repo.get_manual_expenses(user_id, month, year)
        recurring = recurring_total_for_month(self._repo.list_for_user(user_id), year, month_idx)
        return MonthlyExpenseSummary(
            month=month,
            year=year,
            manual_expenses=manual,
            recurring_expenses=recurring,
            total=manual + recurring,
        )
