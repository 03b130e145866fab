"""
Recurring expense data models.

A recurring expense stores a calendar rule only; occurrences are computed
on demand for display and never persisted.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from shared.dates import parse_ymd


class Frequency(str, Enum):
    """Which rule field of a recurring expense is meaningful."""

    ONCE = "once"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class Weekday(str, Enum):
    """Days of the week as stored in `weekly_days`, Sunday first."""

    SUN = "Sun"
    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"

    @classmethod
    def of(cls, day: date) -> "Weekday":
        # date.weekday() is Monday=0
        return WEEKDAYS[(day.weekday() + 1) % 7]


WEEKDAYS = list(Weekday)


class RecurringExpense(BaseModel):
    """A `recurring_expenses` row, owned by a single user."""

    id: int = Field(..., description="Primary key")
    user_id: str = Field(..., description="Owning user ID")
    label: str = Field(..., description="Display label, e.g. Rent")
    amount: Decimal = Field(..., description="Amount charged per occurrence")
    frequency: Frequency = Field(..., description="Rule discriminant")
    start_date: date = Field(..., description="First day the rule applies")
    end_date: Optional[date] = Field(None, description="Last day the rule applies; open-ended if null")
    weekly_days: Optional[list[Weekday]] = Field(None, description="Weekly rule days")
    monthly_day: Optional[int] = Field(None, description="Monthly rule day of month (1-31)")
    yearly_month: Optional[int] = Field(None, description="Yearly rule month (0-11)")
    yearly_day: Optional[int] = Field(None, description="Yearly rule day of month (1-31)")
    created_at: Optional[datetime] = Field(None, description="Creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")

    model_config = {"extra": "ignore"}

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _calendar_date(cls, value):
        # Timestamps stored by older clients carry a time part; keep the day.
        if isinstance(value, str):
            return parse_ymd(value) or value
        return value


class RecurringExpenseDraft(BaseModel):
    """
    Editor form contents for creating or updating a recurring expense.

    Numeric fields accept the raw text the user typed; they are checked by
    `validation.validate_draft`, not here, so callers get form-level errors.
    Rule fields for frequencies other than the selected one may hold stale
    input from before the user switched tabs; they are dropped on save.
    """

    label: str = Field(default="", description="Expense label")
    amount: Union[Decimal, float, int, str, None] = Field(None, description="Amount as entered")
    frequency: Frequency = Field(default=Frequency.ONCE, description="Selected frequency")
    start_date: date = Field(default_factory=date.today, description="Start of validity window")
    end_date: Optional[date] = Field(None, description="End of validity window")
    weekly_days: list[Weekday] = Field(default_factory=list, description="Selected weekdays")
    monthly_day: Union[int, str, None] = Field(default="1", description="Day of month as entered")
    yearly_month: Optional[int] = Field(default=0, description="0-based month index")
    yearly_day: Union[int, str, None] = Field(default="1", description="Day of month as entered")


class ExpenseStatus(BaseModel):
    """Where a rule stands within a month relative to today."""

    last_added: Optional[date] = Field(None, description="Latest occurrence on or before today")
    next_pending: Optional[date] = Field(None, description="Earliest occurrence after today")

    @property
    def has_occurrences(self) -> bool:
        return self.last_added is not None or self.next_pending is not None


class MonthlyExpenseItem(BaseModel):
    """A recurring expense as shown in a month view."""

    expense: RecurringExpense
    status: ExpenseStatus
    occurrences: int = Field(..., ge=0, description="Occurrences in the month")
    can_edit: bool = Field(..., description="False for one-off expenses already charged")
    amount_locked: bool = Field(..., description="True for recurring rules already charged this month")


class RecurringExpenseListResponse(BaseModel):
    """Paginated list of recurring expenses."""

    expenses: list[RecurringExpense] = Field(..., description="Page of expenses")
    total: int = Field(..., description="Total matching expenses")
    page: int = Field(..., description="Current page (1-indexed)")
    page_size: int = Field(..., description="Items per page")
    has_more: bool = Field(..., description="Whether more pages exist")


class MonthlyExpenseListResponse(BaseModel):
    """Paginated month view of recurring expenses."""

    month: str
    year: int
    items: list[MonthlyExpenseItem]
    total: int
    page: int
    page_size: int
    has_more: bool


class MonthlyExpenseSummary(BaseModel):
    """Total expenses for a month: manual entries plus recurring occurrences."""

    month: str
    year: int
    manual_expenses: Decimal = Field(default=Decimal("0"))
    recurring_expenses: Decimal = Field(default=Decimal("0"))
    total: Decimal = Field(default=Decimal("0"))
