"""
Trial API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_trial_service
from api.middleware.auth import get_session
from modules.billing.exceptions import PaymentLookupError
from shared.models import SessionContext

from .exceptions import ProfileNotFoundError
from .interfaces import ITrialService
from .models import TrialStatus

router = APIRouter()


@router.get("/status", response_model=TrialStatus)
async def get_trial_status(
    session: SessionContext = Depends(get_session),
    service: ITrialService = Depends(get_trial_service),
) -> TrialStatus:
    """
    Get the current user's trial day, days remaining and upsell prompt.
    """
    try:
        return await service.get_status(session.user_id)
    except ProfileNotFoundError:
        raise HTTPException(status_code=404, detail="Profile not found")
    except PaymentLookupError as e:
        raise HTTPException(status_code=502, detail=e.to_dict())
