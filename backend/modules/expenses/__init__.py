"""
Recurring expenses module.

Stores user-authored recurring expense rules (one-off, weekly, monthly,
yearly) and computes their occurrences for display. No scheduler ever
materializes occurrences.

Public API:
- IExpenseService: Interface for recurring expense operations
- RecurringExpense, RecurringExpenseDraft, Frequency, Weekday: Data models
- validate_draft, build_record: Form validation
- ExpenseFeed, open_expense_feed: Realtime delta-maintained list
- Expense exceptions: ExpenseValidationError, etc.
"""

from .interfaces import IExpenseService
from .models import (
    Frequency,
    Weekday,
    RecurringExpense,
    RecurringExpenseDraft,
    ExpenseStatus,
    MonthlyExpenseItem,
    RecurringExpenseListResponse,
    MonthlyExpenseListResponse,
    MonthlyExpenseSummary,
)
from .validation import validate_draft, build_record
from .feed import ExpenseFeed, open_expense_feed
from .exceptions import (
    ExpenseError,
    ExpenseValidationError,
    ExpenseNotFoundError,
    ExpenseAccessDeniedError,
)

__all__ = [
    # Interface
    "IExpenseService",
    # Models
    "Frequency",
    "Weekday",
    "RecurringExpense",
    "RecurringExpenseDraft",
    "ExpenseStatus",
    "MonthlyExpenseItem",
    "RecurringExpenseListResponse",
    "MonthlyExpenseListResponse",
    "MonthlyExpenseSummary",
    # Validation
    "validate_draft",
    "build_record",
    # Realtime
    "ExpenseFeed",
    "open_expense_feed",
    # Exceptions
    "ExpenseError",
    "ExpenseValidationError",
    "ExpenseNotFoundError",
    "ExpenseAccessDeniedError",
]
