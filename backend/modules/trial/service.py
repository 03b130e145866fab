"""
Trial service implementation with Supabase.

Reads the trial columns of `profiles` and combines them with the billing
module's payment-method lookup.
"""

from datetime import datetime
from typing import Optional

from supabase import Client

from modules.billing.interfaces import IPaymentMethodService

from .evaluator import evaluate_trial
from .exceptions import ProfileNotFoundError
from .interfaces import ITrialService
from .models import TrialProfile, TrialStatus

PROFILE_COLUMNS = (
    "trial_active, trial_start, trial_end, "
    "stripe_subscription_status, stripe_customer_id"
)


class TrialService(ITrialService):
    """Trial service backed by the `profiles` table."""

    def __init__(self, supabase_client: Client, payments: IPaymentMethodService):
        self._db = supabase_client
        self._payments = payments

    async def get_profile(self, user_id: str) -> TrialProfile:
        result = (
            self._db.table("profiles")
            .select(PROFILE_COLUMNS)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            raise ProfileNotFoundError(user_id)
        return TrialProfile.model_validate(result.data[0])

    async def get_status(self, user_id: str, now: Optional[datetime] = None) -> TrialStatus:
        profile = await self.get_profile(user_id)
        has_payment_method = await self._payments.has_payment_method(profile.stripe_customer_id)
        return evaluate_trial(profile, has_payment_method, now)
