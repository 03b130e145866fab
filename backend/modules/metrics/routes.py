"""
Dashboard metric endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_metrics_service
from api.middleware.auth import get_session
from shared.exceptions import ValidationError
from shared.models import SessionContext

from .interfaces import IMetricsService
from .models import MarketingFunnelsResponse, MonthlyProfit, MonthlyRevenue

router = APIRouter()


@router.get("/revenue", response_model=MonthlyRevenue)
async def get_monthly_revenue(
    month: str = Query(..., description="Month name, e.g. January"),
    year: int = Query(..., ge=1970, le=9999, description="Calendar year"),
    session: SessionContext = Depends(get_session),
    service: IMetricsService = Depends(get_metrics_service),
) -> MonthlyRevenue:
    """
    Monthly revenue card: revenue, prior month and percent change.
    """
    try:
        return await service.get_monthly_revenue(session.user_id, month, year)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())


@router.get("/profit", response_model=MonthlyProfit)
async def get_monthly_profit(
    month: str = Query(..., description="Month name, e.g. January"),
    year: int = Query(..., ge=1970, le=9999, description="Calendar year"),
    session: SessionContext = Depends(get_session),
    service: IMetricsService = Depends(get_metrics_service),
) -> MonthlyProfit:
    """
    Monthly profit card: revenue less expenses, prior month and percent change.
    """
    try:
        return await service.get_monthly_profit(session.user_id, month, year)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())


@router.get("/funnels", response_model=MarketingFunnelsResponse)
async def get_marketing_funnels(
    month: str = Query(..., description="Month name, e.g. January"),
    year: int = Query(..., ge=1970, le=9999, description="Calendar year"),
    top_n: Optional[int] = Query(default=None, ge=1, le=20, description="Sources before folding into Other"),
    session: SessionContext = Depends(get_session),
    service: IMetricsService = Depends(get_metrics_service),
) -> MarketingFunnelsResponse:
    """
    Marketing funnels chart: top sources plus an "Other" bucket.
    """
    try:
        return await service.get_marketing_funnels(session.user_id, month, year, top_n)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())
