"""
Tests for the trial lifecycle evaluator.
"""

import pytest
from datetime import datetime, timedelta, timezone

from modules.trial.evaluator import (
    evaluate_trial,
    get_trial_day_number,
    get_trial_days_remaining,
    get_trial_prompt_mode,
    is_trial_active,
    should_show_soft_prompt,
    should_show_strong_prompt,
    should_show_urgent_prompt,
)
from modules.trial.models import (
    STRONG_PROMPT_DAY,
    TRIAL_DAYS,
    TrialProfile,
    TrialPromptMode,
)

UTC = timezone.utc
START = datetime(2025, 1, 1, 9, 30, tzinfo=UTC)


def make_profile(**overrides) -> TrialProfile:
    data = {
        "trial_active": True,
        "trial_start": START,
        "trial_end": START + timedelta(days=TRIAL_DAYS),
        "stripe_subscription_status": None,
        "stripe_customer_id": "cus_123",
    }
    data.update(overrides)
    return TrialProfile(**data)


def on_day(day: int, hour: int = 12) -> datetime:
    """Clock reading on a given 1-based trial day (day 0 is the day before)."""
    return datetime(2025, 1, 1, hour, tzinfo=UTC) + timedelta(days=day - 1)


class TestIsTrialActive:

    def test_inside_window(self):
        assert is_trial_active(make_profile(), on_day(5)) is True

    def test_before_window(self):
        assert is_trial_active(make_profile(), START - timedelta(minutes=1)) is False

    def test_after_window(self):
        assert is_trial_active(make_profile(), START + timedelta(days=TRIAL_DAYS, seconds=1)) is False

    def test_window_bounds_inclusive(self):
        profile = make_profile()
        assert is_trial_active(profile, START) is True
        assert is_trial_active(profile, profile.trial_end) is True

    def test_trial_flag_off(self):
        assert is_trial_active(make_profile(trial_active=False), on_day(5)) is False

    def test_missing_fields(self):
        assert is_trial_active(make_profile(trial_end=None), on_day(5)) is False
        assert is_trial_active(make_profile(trial_start=None), on_day(5)) is False
        assert is_trial_active(None, on_day(5)) is False

    def test_trialing_status_wins(self):
        """Stripe's trialing status makes the trial active regardless of the window."""
        profile = make_profile(
            trial_active=False,
            trial_start=None,
            trial_end=None,
            stripe_subscription_status="trialing",
        )
        assert is_trial_active(profile, on_day(40)) is True


class TestTrialDayNumber:

    def test_not_started(self):
        assert get_trial_day_number(make_profile(trial_start=None), on_day(3)) == 0
        assert get_trial_day_number(None) == 0

    @pytest.mark.parametrize("hour", [0, 6, 12, 23])
    def test_start_today_is_day_one(self, hour):
        """A trial started today is on day 1 at any time of day."""
        now = datetime(2025, 3, 10, hour, 59, tzinfo=UTC)
        for start_hour in (0, 11, 23):
            profile = make_profile(trial_start=datetime(2025, 3, 10, start_hour, 30, tzinfo=UTC))
            assert get_trial_day_number(profile, now) == 1

    @pytest.mark.parametrize("hour", [0, 12, 23])
    def test_start_yesterday_is_day_two(self, hour):
        now = datetime(2025, 3, 10, hour, 1, tzinfo=UTC)
        profile = make_profile(trial_start=datetime(2025, 3, 9, 23, 59, tzinfo=UTC))
        assert get_trial_day_number(profile, now) == 2

    def test_truncates_in_callers_timezone(self):
        """Days are counted on the caller's calendar, not UTC's."""
        eastern = timezone(timedelta(hours=-5))
        # 2025-03-10 02:00 UTC is still 2025-03-09 in UTC-5
        profile = make_profile(trial_start=datetime(2025, 3, 10, 2, 0, tzinfo=UTC))
        now = datetime(2025, 3, 10, 8, 0, tzinfo=eastern)
        assert get_trial_day_number(profile, now) == 2

    def test_naive_datetimes(self):
        profile = make_profile(
            trial_start=datetime(2025, 1, 1, 22, 0),
            trial_end=datetime(2025, 1, 22, 22, 0),
        )
        assert get_trial_day_number(profile, datetime(2025, 1, 2, 1, 0)) == 2

    def test_counts_past_trial_length(self):
        assert get_trial_day_number(make_profile(), on_day(30)) == 30


class TestTrialDaysRemaining:

    def test_first_day(self):
        assert get_trial_days_remaining(make_profile(), on_day(1)) == TRIAL_DAYS

    def test_last_day(self):
        assert get_trial_days_remaining(make_profile(), on_day(TRIAL_DAYS)) == 1

    def test_never_negative(self):
        profile = make_profile()
        for day in range(0, TRIAL_DAYS + 15):
            assert get_trial_days_remaining(profile, on_day(day)) >= 0

    def test_zero_once_past_trial(self):
        profile = make_profile()
        for day in range(TRIAL_DAYS + 1, TRIAL_DAYS + 10):
            assert get_trial_days_remaining(profile, on_day(day)) == 0

    def test_not_started(self):
        assert get_trial_days_remaining(make_profile(trial_start=None), on_day(3)) == 0


class TestPromptPredicates:

    def test_soft_window(self):
        profile = make_profile()
        assert should_show_soft_prompt(profile, False, on_day(13)) is False
        assert should_show_soft_prompt(profile, False, on_day(14)) is True
        assert should_show_soft_prompt(profile, False, on_day(17)) is True
        assert should_show_soft_prompt(profile, False, on_day(18)) is False

    def test_urgent_window(self):
        profile = make_profile()
        assert should_show_urgent_prompt(profile, False, on_day(17)) is False
        assert should_show_urgent_prompt(profile, False, on_day(18)) is True
        assert should_show_urgent_prompt(profile, False, on_day(20)) is True
        assert should_show_urgent_prompt(profile, False, on_day(21)) is False

    def test_soft_and_urgent_require_active_trial(self):
        profile = make_profile(trial_active=False)
        assert should_show_soft_prompt(profile, False, on_day(15)) is False
        assert should_show_urgent_prompt(profile, False, on_day(19)) is False

    def test_strong_ignores_trial_activity(self):
        """An expired trial with no payment method stays blocked."""
        profile = make_profile(trial_active=False)
        assert should_show_strong_prompt(profile, False, on_day(STRONG_PROMPT_DAY)) is True
        assert should_show_strong_prompt(profile, False, on_day(60)) is True

    def test_strong_suppressed_by_paid_subscription(self):
        profile = make_profile(stripe_subscription_status="active")
        assert should_show_strong_prompt(profile, False, on_day(30)) is False

    def test_payment_method_suppresses_all(self):
        profile = make_profile()
        assert should_show_soft_prompt(profile, True, on_day(15)) is False
        assert should_show_urgent_prompt(profile, True, on_day(19)) is False
        assert should_show_strong_prompt(profile, True, on_day(25)) is False


class TestTrialPromptMode:

    def test_example_day_fifteen_is_soft(self):
        profile = make_profile(
            trial_start=datetime(2025, 1, 1, tzinfo=UTC),
            trial_end=datetime(2025, 1, 22, tzinfo=UTC),
        )
        now = datetime(2025, 1, 15, 10, 0, tzinfo=UTC)
        assert get_trial_day_number(profile, now) == 15
        assert get_trial_prompt_mode(profile, False, now) == TrialPromptMode.SOFT

    @pytest.mark.parametrize("profile", [
        make_profile(),
        make_profile(trial_active=False),
        make_profile(stripe_subscription_status="trialing"),
        make_profile(trial_start=None),
        None,
    ])
    def test_payment_method_always_none(self, profile):
        for day in range(0, STRONG_PROMPT_DAY + 11):
            assert get_trial_prompt_mode(profile, True, on_day(day)) == TrialPromptMode.NONE

    @pytest.mark.parametrize("profile", [
        make_profile(),
        make_profile(trial_active=False),
        make_profile(stripe_subscription_status="trialing"),
        make_profile(trial_end=None),
    ])
    def test_modes_are_exclusive_and_monotonic(self, profile):
        previous = TrialPromptMode.NONE
        for day in range(0, STRONG_PROMPT_DAY + 11):
            now = on_day(day)
            flags = [
                should_show_strong_prompt(profile, False, now),
                should_show_urgent_prompt(profile, False, now),
                should_show_soft_prompt(profile, False, now),
            ]
            assert sum(flags) <= 1

            mode = get_trial_prompt_mode(profile, False, now)
            assert mode.severity >= previous.severity
            previous = mode

    def test_sweep_thresholds(self):
        profile = make_profile()
        expected = {
            0: TrialPromptMode.NONE,
            13: TrialPromptMode.NONE,
            14: TrialPromptMode.SOFT,
            17: TrialPromptMode.SOFT,
            18: TrialPromptMode.URGENT,
            20: TrialPromptMode.URGENT,
            21: TrialPromptMode.STRONG,
            31: TrialPromptMode.STRONG,
        }
        for day, mode in expected.items():
            assert get_trial_prompt_mode(profile, False, on_day(day)) == mode


class TestEvaluateTrial:

    def test_combines_fields(self):
        status = evaluate_trial(make_profile(), has_payment_method=False, now=on_day(19))
        assert status.active is True
        assert status.day_number == 19
        assert status.days_remaining == 3
        assert status.trial_days == TRIAL_DAYS
        assert status.prompt_mode == TrialPromptMode.URGENT
        assert status.has_payment_method is False

    def test_no_profile(self):
        status = evaluate_trial(None, has_payment_method=False, now=on_day(1))
        assert status.active is False
        assert status.day_number == 0
        assert status.days_remaining == 0
        assert status.prompt_mode == TrialPromptMode.NONE
