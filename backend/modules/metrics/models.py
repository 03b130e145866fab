"""
Dashboard metrics data models.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class BarberType(str, Enum):
    """How a barber is paid; commission barbers keep a share plus tips."""

    RENTAL = "rental"
    COMMISSION = "commission"


class BarberProfile(BaseModel):
    """Compensation columns of a `profiles` row."""

    role: Optional[str] = None
    barber_type: Optional[BarberType] = None
    commission_rate: Optional[Decimal] = None

    model_config = {"extra": "ignore"}

    @property
    def is_barber(self) -> bool:
        return (self.role or "").lower() == "barber"


class MonthlyRevenue(BaseModel):
    """Revenue for a month with the change from the month before."""

    month: str
    year: int
    revenue: Optional[Decimal] = Field(None, description="Revenue for the month, if recorded")
    previous_revenue: Optional[Decimal] = Field(None, description="Revenue for the prior month")
    change_pct: Optional[float] = Field(None, description="Percent change, None without a baseline")


class MonthlyProfit(BaseModel):
    """Profit for a month with the change from the month before."""

    month: str
    year: int
    profit: Optional[Decimal] = Field(None, description="final_revenue minus expenses, if both recorded")
    previous_profit: Optional[Decimal] = Field(None, description="Profit for the prior month")
    change_pct: Optional[float] = Field(None, description="Percent change, None without a baseline")


class MarketingFunnel(BaseModel):
    """New-client acquisition and retention for one booking source."""

    source: str
    new_clients: int = 0
    returning_clients: int = 0
    new_clients_retained: int = 0
    retention: float = Field(default=0.0, description="Retained / new, as a percentage")
    avg_ticket: float = 0.0


class MarketingFunnelsResponse(BaseModel):
    month: str
    year: int
    funnels: list[MarketingFunnel]
