"""
Tests for recurring expense validation and record building.
"""

import pytest
from datetime import date, datetime, timezone
from decimal import Decimal

from modules.expenses.exceptions import ExpenseValidationError
from modules.expenses.models import Frequency, RecurringExpenseDraft, Weekday
from modules.expenses.validation import (
    build_record,
    normalize_weekdays,
    parse_amount,
    parse_day,
    validate_draft,
)

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_draft(**overrides) -> RecurringExpenseDraft:
    data = {
        "label": "Chair rent",
        "amount": "250.00",
        "frequency": Frequency.ONCE,
        "start_date": date(2025, 3, 1),
    }
    data.update(overrides)
    return RecurringExpenseDraft(**data)


class TestParseAmount:

    @pytest.mark.parametrize("value,expected", [
        ("12.50", Decimal("12.50")),
        (" 7 ", Decimal("7")),
        (3, Decimal("3")),
        (Decimal("0.99"), Decimal("0.99")),
    ])
    def test_valid(self, value, expected):
        assert parse_amount(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   ", "abc", "12,50", "NaN", "Infinity", True, "1e400", "-1e400"])
    def test_invalid(self, value):
        assert parse_amount(value) is None


class TestParseDay:

    def test_values(self):
        assert parse_day("15") == 15
        assert parse_day(3) == 3
        assert parse_day("-2") == -2

    def test_invalid(self):
        assert parse_day("") is None
        assert parse_day("1.5") is None
        assert parse_day("--5") is None
        assert parse_day("-") is None
        assert parse_day("\u00b2") is None
        assert parse_day(None) is None


class TestValidateDraft:

    def test_valid_once(self):
        validate_draft(make_draft())

    def test_blank_label(self):
        with pytest.raises(ExpenseValidationError, match="Enter a label") as exc_info:
            validate_draft(make_draft(label="   "))
        assert exc_info.value.field == "label"

    def test_bad_amount(self):
        with pytest.raises(ExpenseValidationError, match="Enter a valid amount"):
            validate_draft(make_draft(amount="lots"))

    def test_missing_amount(self):
        with pytest.raises(ExpenseValidationError, match="Enter a valid amount"):
            validate_draft(make_draft(amount=None))

    def test_monthly_day_31_accepted(self):
        validate_draft(make_draft(frequency=Frequency.MONTHLY, monthly_day="31"))

    def test_monthly_day_32_rejected(self):
        with pytest.raises(ExpenseValidationError, match="Monthly day must be 1-31"):
            validate_draft(make_draft(frequency=Frequency.MONTHLY, monthly_day="32"))

    @pytest.mark.parametrize("day", ["0", "", "x", "--5", "-", "\u00b2", "\u0665"])
    def test_monthly_day_invalid(self, day):
        with pytest.raises(ExpenseValidationError, match="Monthly day"):
            validate_draft(make_draft(frequency=Frequency.MONTHLY, monthly_day=day))

    def test_monthly_day_ignored_for_other_frequencies(self):
        validate_draft(make_draft(frequency=Frequency.ONCE, monthly_day="99"))

    def test_yearly_day_rejected(self):
        with pytest.raises(ExpenseValidationError, match="Yearly day must be 1-31"):
            validate_draft(make_draft(frequency=Frequency.YEARLY, yearly_day="32", yearly_month=5))

    @pytest.mark.parametrize("month", [-1, 12, None])
    def test_yearly_month_out_of_range(self, month):
        with pytest.raises(ExpenseValidationError, match="Yearly month must be 0-11") as exc_info:
            validate_draft(make_draft(frequency=Frequency.YEARLY, yearly_day="1", yearly_month=month))
        assert exc_info.value.field == "yearly_month"

    @pytest.mark.parametrize("month", [0, 11])
    def test_yearly_month_bounds(self, month):
        validate_draft(make_draft(frequency=Frequency.YEARLY, yearly_day="1", yearly_month=month))

    def test_end_date_before_start(self):
        with pytest.raises(ExpenseValidationError, match="End date must be after start date"):
            validate_draft(make_draft(end_date=date(2025, 2, 1)))

    def test_end_date_equal_start(self):
        with pytest.raises(ExpenseValidationError):
            validate_draft(make_draft(end_date=date(2025, 3, 1)))

    def test_error_to_dict(self):
        with pytest.raises(ExpenseValidationError) as exc_info:
            validate_draft(make_draft(label=""))
        assert exc_info.value.to_dict() == {
            "error": "INVALID_EXPENSE",
            "message": "Enter a label",
            "details": {"field": "label"},
        }


class TestNormalizeWeekdays:

    def test_dedup_and_order(self):
        days = [Weekday.FRI, Weekday.SUN, Weekday.MON, Weekday.FRI]
        assert normalize_weekdays(days) == [Weekday.SUN, Weekday.MON, Weekday.FRI]


class TestBuildRecord:

    def test_switch_weekly_to_once_drops_weekly_days(self):
        """Stale weekly input must not be persisted once the frequency changes."""
        draft = make_draft(
            frequency=Frequency.ONCE,
            weekly_days=[Weekday.MON, Weekday.WED],
            monthly_day="15",
            yearly_month=3,
            yearly_day="9",
        )

        record = build_record(draft, now=NOW)

        assert record["frequency"] == "once"
        assert record["weekly_days"] is None
        assert record["monthly_day"] is None
        assert record["yearly_month"] is None
        assert record["yearly_day"] is None

    def test_weekly(self):
        draft = make_draft(frequency=Frequency.WEEKLY, weekly_days=[Weekday.WED, Weekday.MON])
        record = build_record(draft, now=NOW)
        assert record["weekly_days"] == ["Mon", "Wed"]
        assert record["monthly_day"] is None

    def test_monthly(self):
        draft = make_draft(frequency=Frequency.MONTHLY, monthly_day="5", weekly_days=[Weekday.MON])
        record = build_record(draft, now=NOW)
        assert record["monthly_day"] == 5
        assert record["weekly_days"] is None

    def test_yearly(self):
        draft = make_draft(frequency=Frequency.YEARLY, yearly_month=11, yearly_day="25")
        record = build_record(draft, now=NOW)
        assert record["yearly_month"] == 11
        assert record["yearly_day"] == 25
        assert record["monthly_day"] is None

    def test_common_fields(self):
        draft = make_draft(label="  Clippers  ", amount="89.99", end_date=date(2025, 12, 31))
        record = build_record(draft, now=NOW)
        assert record["label"] == "Clippers"
        assert record["amount"] == pytest.approx(89.99)
        assert record["start_date"] == "2025-03-01"
        assert record["end_date"] == "2025-12-31"
        assert record["updated_at"] == NOW.isoformat()

    def test_create_stamps_owner_and_created_at(self):
        record = build_record(make_draft(), user_id="user-1", now=NOW)
        assert record["user_id"] == "user-1"
        assert record["created_at"] == NOW.isoformat()

    def test_update_leaves_owner_alone(self):
        record = build_record(make_draft(), now=NOW)
        assert "user_id" not in record
        assert "created_at" not in record

    def test_invalid_draft_raises(self):
        with pytest.raises(ExpenseValidationError):
            build_record(make_draft(frequency=Frequency.MONTHLY, monthly_day="32"))

    def test_amount_too_large_for_float_rejected(self):
        with pytest.raises(ExpenseValidationError, match="Enter a valid amount") as exc_info:
            build_record(make_draft(amount="1e400"), now=NOW)
        assert exc_info.value.field == "amount"
