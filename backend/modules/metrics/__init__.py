"""
Dashboard metrics module.

Percentage deltas, commission-adjusted revenue, monthly profit and
marketing-funnel aggregation for the dashboard cards.
"""

from .interfaces import IMetricsService
from .models import (
    BarberType,
    BarberProfile,
    MonthlyRevenue,
    MonthlyProfit,
    MarketingFunnel,
    MarketingFunnelsResponse,
)
from .revenue import percent_change, effective_revenue, monthly_profit
from .funnels import aggregate_marketing_funnels

__all__ = [
    "IMetricsService",
    "BarberType",
    "BarberProfile",
    "MonthlyRevenue",
    "MonthlyProfit",
    "MarketingFunnel",
    "MarketingFunnelsResponse",
    "percent_change",
    "effective_revenue",
    "monthly_profit",
    "aggregate_marketing_funnels",
]
