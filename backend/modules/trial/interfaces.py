"""
Trial module interface.
"""

from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from .models import TrialProfile, TrialStatus


@runtime_checkable
class ITrialService(Protocol):
    """Interface for trial lifecycle queries."""

    async def get_profile(self, user_id: str) -> TrialProfile:
        """
        Load the trial columns of a user's profile.

        Raises:
            ProfileNotFoundError: If the user has no profile row
        """
        ...

    async def get_status(self, user_id: str, now: Optional[datetime] = None) -> TrialStatus:
        """
        Evaluate the user's trial against the clock.

        Args:
            user_id: Supabase user ID
            now: Clock reading to evaluate against (defaults to local now)

        Returns:
            TrialStatus with day number, days remaining and prompt mode

        Raises:
            ProfileNotFoundError: If the user has no profile row
            PaymentLookupError: If the payment-method lookup failed
        """
        ...
