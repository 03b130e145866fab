"""
Trial module data models.

These models describe the read-only slice of a profile that drives the
trial lifecycle, and the status derived from it.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


# Trial lifecycle thresholds (in 1-based trial days)
TRIAL_DAYS = 21
SOFT_PROMPT_DAY = 14
URGENT_PROMPT_DAY = 18
STRONG_PROMPT_DAY = 21


class TrialPromptMode(str, Enum):
    """Escalating tiers of upsell messaging."""

    NONE = "none"
    SOFT = "soft"        # Day 14-17
    URGENT = "urgent"    # Day 18-20
    STRONG = "strong"    # Day 21+, blocking

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {
    TrialPromptMode.NONE: 0,
    TrialPromptMode.SOFT: 1,
    TrialPromptMode.URGENT: 2,
    TrialPromptMode.STRONG: 3,
}


class TrialProfile(BaseModel):
    """
    Read-only view of the trial columns on a `profiles` row.

    Created once at trial activation by the billing backend and never
    mutated here. Unparseable timestamps are treated as absent so a bad
    row reads as "trial not started" instead of failing the request.
    """

    trial_active: Optional[bool] = Field(None, description="Whether a trial was ever activated")
    trial_start: Optional[datetime] = Field(None, description="Trial window start")
    trial_end: Optional[datetime] = Field(None, description="Trial window end")
    stripe_subscription_status: Optional[str] = Field(
        None,
        description="Externally-owned billing state (trialing, active, ...)",
    )
    stripe_customer_id: Optional[str] = Field(None, description="Stripe customer ID")

    model_config = {"extra": "ignore"}

    @field_validator("trial_start", "trial_end", mode="before")
    @classmethod
    def _lenient_timestamp(cls, value: Any) -> Any:
        if value is None or isinstance(value, datetime):
            return value
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value.strip())
            except ValueError:
                return None
        return None


class TrialStatus(BaseModel):
    """Derived trial state for the dashboard banner and paywall."""

    active: bool = Field(..., description="Whether the trial is currently active")
    day_number: int = Field(..., description="1-based trial day, 0 if not started")
    days_remaining: int = Field(..., ge=0, description="Days left in the trial window")
    trial_days: int = Field(default=TRIAL_DAYS, description="Nominal trial length")
    prompt_mode: TrialPromptMode = Field(..., description="Upsell prompt to display")
    has_payment_method: bool = Field(..., description="Whether a payment method is on file")
