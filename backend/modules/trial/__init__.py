"""
Trial module.

Derives trial day number, days remaining and the upsell prompt tier from a
profile's trial window and Stripe subscription status.

Public API:
- ITrialService: Interface for trial queries
- TrialProfile, TrialStatus, TrialPromptMode: Data models
- Evaluator functions: is_trial_active, get_trial_prompt_mode, ...
"""

from .interfaces import ITrialService
from .models import (
    TRIAL_DAYS,
    SOFT_PROMPT_DAY,
    URGENT_PROMPT_DAY,
    STRONG_PROMPT_DAY,
    TrialProfile,
    TrialPromptMode,
    TrialStatus,
)
from .evaluator import (
    is_trial_active,
    get_trial_day_number,
    get_trial_days_remaining,
    should_show_soft_prompt,
    should_show_urgent_prompt,
    should_show_strong_prompt,
    get_trial_prompt_mode,
    evaluate_trial,
)
from .exceptions import ProfileNotFoundError

__all__ = [
    # Interface
    "ITrialService",
    # Models
    "TRIAL_DAYS",
    "SOFT_PROMPT_DAY",
    "URGENT_PROMPT_DAY",
    "STRONG_PROMPT_DAY",
    "TrialProfile",
    "TrialPromptMode",
    "TrialStatus",
    # Evaluator
    "is_trial_active",
    "get_trial_day_number",
    "get_trial_days_remaining",
    "should_show_soft_prompt",
    "should_show_urgent_prompt",
    "should_show_strong_prompt",
    "get_trial_prompt_mode",
    "evaluate_trial",
    # Exceptions
    "ProfileNotFoundError",
]
