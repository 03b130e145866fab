"""
Recurring expense API endpoints.

Provides REST endpoints for authoring, editing and deleting recurring
expense rules, plus month views used by the finances screen.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_expense_service
from api.models.errors import HTTPErrorResponse
from api.middleware.auth import get_session
from shared.models import SessionContext

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

router = APIRouter()


@router.get("", response_model=RecurringExpenseListResponse)
async def list_expenses(
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    page_size: Optional[int] = Query(default=None, ge=1, le=100, description="Items per page"),
    session: SessionContext = Depends(get_session),
    service: IExpenseService = Depends(get_expense_service),
) -> RecurringExpenseListResponse:
    """
    List the current user's recurring expenses, most recent first.
    """
    return await service.list_expenses(session.user_id, page, page_size)


@router.get("/month", response_model=MonthlyExpenseListResponse)
async def list_expenses_for_month(
    month: str = Query(..., description="Month name, e.g. January"),
    year: int = Query(..., ge=1970, le=9999, description="Calendar year"),
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    session: SessionContext = Depends(get_session),
    service: IExpenseService = Depends(get_expense_service),
) -> MonthlyExpenseListResponse:
    """
    List the expenses that charge within a month with their
    last-added / next-pending status.
    """
    try:
        return await service.list_for_month(session.user_id, month, year, page)
    except ExpenseValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())


@router.get("/summary", response_model=MonthlyExpenseSummary)
async def get_monthly_summary(
    month: str = Query(..., description="Month name, e.g. January"),
    year: int = Query(..., ge=1970, le=9999, description="Calendar year"),
    session: SessionContext = Depends(get_session),
    service: IExpenseService = Depends(get_expense_service),
) -> MonthlyExpenseSummary:
    """
    Total expenses for a month: manual entries plus recurring charges.
    """
    try:
        return await service.get_monthly_summary(session.user_id, month, year)
    except ExpenseValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())


@router.post(
    "",
    response_model=RecurringExpense,
    status_code=201,
    responses={422: {"model": HTTPErrorResponse}},
)
async def create_expense(
    draft: RecurringExpenseDraft,
    session: SessionContext = Depends(get_session),
    service: IExpenseService = Depends(get_expense_service),
) -> RecurringExpense:
    """
    Create a recurring expense.
    """
    try:
        return await service.create_expense(session.user_id, draft)
    except ExpenseValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())


@router.put(
    "/{expense_id}",
    response_model=RecurringExpense,
    responses={422: {"model": HTTPErrorResponse}},
)
async def update_expense(
    expense_id: int,
    draft: RecurringExpenseDraft,
    session: SessionContext = Depends(get_session),
    service: IExpenseService = Depends(get_expense_service),
) -> RecurringExpense:
    """
    Overwrite a recurring expense with the submitted form.
    """
    try:
        return await service.update_expense(session.user_id, expense_id, draft)
    except ExpenseValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())
    except (ExpenseNotFoundError, ExpenseAccessDeniedError):
        raise HTTPException(status_code=404, detail="Expense not found")


@router.delete("/{expense_id}", status_code=204)
async def delete_expense(
    expense_id: int,
    session: SessionContext = Depends(get_session),
    service: IExpenseService = Depends(get_expense_service),
) -> None:
    """
    Permanently delete a recurring expense.
    """
    try:
        await service.delete_expense(session.user_id, expense_id)
    except (ExpenseNotFoundError, ExpenseAccessDeniedError):
        raise HTTPException(status_code=404, detail="Expense not found")
