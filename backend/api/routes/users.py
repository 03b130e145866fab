"""
Account endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, EmailStr

from modules.trial.evaluator import is_trial_active
from modules.trial.exceptions import ProfileNotFoundError
from modules.trial.interfaces import ITrialService
from shared.models import AuthenticatedUser
from ..dependencies import get_trial_service
from ..middleware.auth import get_current_user

router = APIRouter()


class AccountResponse(BaseModel):
    """Signed-in user with the billing state stored on their profile."""

    id: str
    email: EmailStr
    email_verified: bool
    has_profile: bool
    trial_active: bool = False
    subscription_status: Optional[str] = None


@router.get("/me", response_model=AccountResponse)
async def get_account(
    user: AuthenticatedUser = Depends(get_current_user),
    trial_service: ITrialService = Depends(get_trial_service),
) -> AccountResponse:
    """
    Get the current user's account.

    Identity comes from the access token. A user who signed up but has no
    profile row yet gets `has_profile: false` instead of a 404.
    """
    try:
        profile = await trial_service.get_profile(user.id)
    except ProfileNotFoundError:
        profile = None

    return AccountResponse(
        id=user.id,
        email=user.email,
        email_verified=user.email_verified,
        has_profile=profile is not None,
        trial_active=is_trial_active(profile),
        subscription_status=profile.stripe_subscription_status if profile else None,
    )
