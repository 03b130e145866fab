"""
Metrics module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import MarketingFunnelsResponse, MonthlyProfit, MonthlyRevenue


@runtime_checkable
class IMetricsService(Protocol):
    """Interface for dashboard metric queries."""

    async def get_monthly_revenue(self, user_id: str, month: str, year: int) -> MonthlyRevenue:
        """
        Revenue for a month and its change against the previous month.

        Raises:
            ValidationError: If the month name is unknown
        """
        ...

    async def get_monthly_profit(self, user_id: str, month: str, year: int) -> MonthlyProfit:
        """
        Profit (revenue less expenses) for a month and its change.

        Raises:
            ValidationError: If the month name is unknown
        """
        ...

    async def get_marketing_funnels(
        self,
        user_id: str,
        month: str,
        year: int,
        top_n: Optional[int] = None,
    ) -> MarketingFunnelsResponse:
        """
        New-client funnels by booking source for a month.

        Raises:
            ValidationError: If the month name is unknown
        """
        ...
