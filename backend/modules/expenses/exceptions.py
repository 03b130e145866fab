"""
Recurring expense module exceptions.
"""

from typing import Optional

from shared.exceptions import (
    ChairbookError,
    NotFoundError,
    ValidationError,
    AuthorizationError,
)


class ExpenseError(ChairbookError):
    """Base exception for recurring-expense errors."""

    pass


class ExpenseValidationError(ValidationError):
    """
    Raised when an editor form fails validation.

    The message is user-facing and shown as a blocking alert; nothing is
    written when this is raised.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            code="INVALID_EXPENSE",
            details={"field": field} if field else {},
        )
        self.field = field


class ExpenseNotFoundError(NotFoundError):
    """Raised when a recurring expense is not found."""

    def __init__(self, expense_id: int):
        super().__init__(
            f"Recurring expense not found: {expense_id}",
            code="EXPENSE_NOT_FOUND",
            details={"expense_id": expense_id},
        )


class ExpenseAccessDeniedError(AuthorizationError):
    """Raised when a user touches another user's recurring expense."""

    def __init__(self, expense_id: int, user_id: str):
        super().__init__(
            f"Access denied to recurring expense: {expense_id}",
            code="EXPENSE_ACCESS_DENIED",
            details={"expense_id": expense_id, "user_id": user_id},
        )
