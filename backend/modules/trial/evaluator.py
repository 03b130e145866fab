"""
Trial lifecycle evaluation.

Pure functions over a TrialProfile. Every function takes an optional `now`
so callers (and tests) can pin the clock; by default the local wall clock
is used. Day numbers use calendar-day granularity: both `now` and the trial
start are truncated to midnight in `now`'s timezone before subtracting.
"""

from datetime import date, datetime
from typing import Optional

from modules.billing.models import SubscriptionStatus

from .models import (
    SOFT_PROMPT_DAY,
    STRONG_PROMPT_DAY,
    TRIAL_DAYS,
    URGENT_PROMPT_DAY,
    TrialProfile,
    TrialPromptMode,
    TrialStatus,
)

TRIALING = SubscriptionStatus.TRIALING.value
ACTIVE = SubscriptionStatus.ACTIVE.value


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now().astimezone()


def _align(value: datetime, now: datetime) -> datetime:
    """Express `value` in the same timezone frame as `now`."""
    if now.tzinfo is None:
        if value.tzinfo is None:
            return value
        return value.astimezone().replace(tzinfo=None)
    if value.tzinfo is None:
        return value.replace(tzinfo=now.tzinfo)
    return value.astimezone(now.tzinfo)


def _local_day(value: datetime, now: datetime) -> date:
    return _align(value, now).date()


def is_trial_active(profile: Optional[TrialProfile], now: Optional[datetime] = None) -> bool:
    """
    Whether the profile is inside its trial.

    Stripe's "trialing" status wins over the locally cached window.
    """
    if profile is None:
        return False
    if profile.stripe_subscription_status == TRIALING:
        return True
    if not profile.trial_active or profile.trial_start is None or profile.trial_end is None:
        return False

    current = _now(now)
    start = _align(profile.trial_start, current)
    end = _align(profile.trial_end, current)
    return start <= current <= end


def get_trial_day_number(profile: Optional[TrialProfile], now: Optional[datetime] = None) -> int:
    """
    Which day of the trial the user is on (1-based).

    Returns 0 if the trial hasn't started. Keeps counting past TRIAL_DAYS
    once the trial has run out.
    """
    if profile is None or profile.trial_start is None:
        return 0

    current = _now(now)
    start_day = _local_day(profile.trial_start, current)
    return (current.date() - start_day).days + 1


def get_trial_days_remaining(profile: Optional[TrialProfile], now: Optional[datetime] = None) -> int:
    """Days left in the trial; 0 once expired or before it starts."""
    if profile is None or profile.trial_start is None:
        return 0

    remaining = TRIAL_DAYS - get_trial_day_number(profile, now) + 1
    return max(0, remaining)


def should_show_soft_prompt(
    profile: Optional[TrialProfile],
    has_payment_method: bool = False,
    now: Optional[datetime] = None,
) -> bool:
    """Soft prompt: day 14-17 of an active trial with no payment method."""
    if has_payment_method:
        return False
    if not is_trial_active(profile, now):
        return False

    day = get_trial_day_number(profile, now)
    return SOFT_PROMPT_DAY <= day < URGENT_PROMPT_DAY


def should_show_urgent_prompt(
    profile: Optional[TrialProfile],
    has_payment_method: bool = False,
    now: Optional[datetime] = None,
) -> bool:
    """Urgent prompt: day 18-20 of an active trial with no payment method."""
    if has_payment_method:
        return False
    if not is_trial_active(profile, now):
        return False

    day = get_trial_day_number(profile, now)
    return URGENT_PROMPT_DAY <= day < STRONG_PROMPT_DAY


def should_show_strong_prompt(
    profile: Optional[TrialProfile],
    has_payment_method: bool = False,
    now: Optional[datetime] = None,
) -> bool:
    """
    Strong (blocking) prompt: day 21+ with no payment method.

    Does not look at trial activity, so users who let the clock run out
    without linking payment stay blocked. A paid subscription suppresses it.
    """
    if has_payment_method:
        return False
    if profile is not None and profile.stripe_subscription_status == ACTIVE:
        return False

    return get_trial_day_number(profile, now) >= STRONG_PROMPT_DAY


def get_trial_prompt_mode(
    profile: Optional[TrialProfile],
    has_payment_method: bool = False,
    now: Optional[datetime] = None,
) -> TrialPromptMode:
    """Highest-priority prompt that applies: strong, urgent, soft, else none."""
    current = _now(now)
    if should_show_strong_prompt(profile, has_payment_method, current):
        return TrialPromptMode.STRONG
    if should_show_urgent_prompt(profile, has_payment_method, current):
        return TrialPromptMode.URGENT
    if should_show_soft_prompt(profile, has_payment_method, current):
        return TrialPromptMode.SOFT
    return TrialPromptMode.NONE


def evaluate_trial(
    profile: Optional[TrialProfile],
    has_payment_method: bool = False,
    now: Optional[datetime] = None,
) -> TrialStatus:
    """Compute the full TrialStatus against a single clock reading."""
    current = _now(now)
    return TrialStatus(
        active=is_trial_active(profile, current),
        day_number=get_trial_day_number(profile, current),
        days_remaining=get_trial_days_remaining(profile, current),
        prompt_mode=get_trial_prompt_mode(profile, has_payment_method, current),
        has_payment_method=has_payment_method,
    )
