"""
Dashboard metrics service with Supabase.

Reads `profiles`, `monthly_data` and `acuity_clients` and applies the
dashboard arithmetic in `revenue` and `funnels`.
"""

from decimal import Decimal
from typing import Optional

from supabase import Client

from shared.dates import MONTH_NAMES, month_index, previous_month
from shared.exceptions import ValidationError

from .funnels import EXCLUDED_SOURCES, aggregate_marketing_funnels
from .interfaces import IMetricsService
from .models import BarberProfile, MarketingFunnelsResponse, MonthlyProfit, MonthlyRevenue
from .revenue import effective_revenue, monthly_profit, percent_change

DEFAULT_TOP_N = 4


def _canonical_month(month: str) -> str:
    try:
        return MONTH_NAMES[month_index(month)]
    except ValueError:
        raise ValidationError(f"Unknown month: {month}", code="INVALID_MONTH")


class MetricsService(IMetricsService):
    """Dashboard metrics backed by Supabase tables."""

    def __init__(self, supabase_client: Client, top_n: int = DEFAULT_TOP_N):
        self._db = supabase_client
        self._top_n = top_n

    def _get_barber_profile(self, user_id: str) -> Optional[BarberProfile]:
        result = (
            self._db.table("profiles")
            .select("role, barber_type, commission_rate")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return BarberProfile.model_validate(result.data[0])

    def _get_revenue(
        self,
        user_id: str,
        month: str,
        year: int,
        profile: Optional[BarberProfile],
    ) -> Optional[Decimal]:
        result = (
            self._db.table("monthly_data")
            .select("final_revenue, tips")
            .eq("user_id", user_id)
            .eq("month", month)
            .eq("year", year)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        row = result.data[0]
        total = Decimal(str(row.get("final_revenue") or 0))
        tips = Decimal(str(row.get("tips") or 0))
        return effective_revenue(total, tips, profile)

    async def get_monthly_revenue(self, user_id: str, month: str, year: int) -> MonthlyRevenue:
        month = _canonical_month(month)
        profile = self._get_barber_profile(user_id)

        revenue = self._get_revenue(user_id, month, year, profile)
        prev_month, prev_year = previous_month(month, year)
        previous = self._get_revenue(user_id, prev_month, prev_year, profile)

        return MonthlyRevenue(
            month=month,
            year=year,
            revenue=revenue,
            previous_revenue=previous,
            change_pct=percent_change(revenue, previous),
        )

    def _get_profit(self, user_id: str, month: str, year: int) -> Optional[Decimal]:
        result = (
            self._db.table("monthly_data")
            .select("final_revenue, expenses")
            .eq("user_id", user_id)
            .eq("month", month)
            .eq("year", year)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        row = result.data[0]
        revenue = row.get("final_revenue")
        expenses = row.get("expenses")
        return monthly_profit(
            Decimal(str(revenue)) if revenue is not None else None,
            Decimal(str(expenses)) if expenses is not None else None,
        )

    async def get_monthly_profit(self, user_id: str, month: str, year: int) -> MonthlyProfit:
        month = _canonical_month(month)

        profit = self._get_profit(user_id, month, year)
        prev_month, prev_year = previous_month(month, year)
        previous = self._get_profit(user_id, prev_month, prev_year)

        return MonthlyProfit(
            month=month,
            year=year,
            profit=profit,
            previous_profit=previous,
            change_pct=percent_change(profit, previous),
        )

    async def get_marketing_funnels(
        self,
        user_id: str,
        month: str,
        year: int,
        top_n: Optional[int] = None,
    ) -> MarketingFunnelsResponse:
        month = _canonical_month(month)

        query = (
            self._db.table("acuity_clients")
            .select("client_id, first_appt, second_appt, first_source")
            .eq("user_id", user_id)
            .not_.is_("first_source", "null")
        )
        for source in sorted(EXCLUDED_SOURCES):
            query = query.neq("first_source", source)
        result = (
            query.gte("first_appt", f"{year}-01-01")
            .lte("first_appt", f"{year}-12-31")
            .execute()
        )

        funnels = aggregate_marketing_funnels(
            result.data or [], month, year, top_n or self._top_n
        )
        return MarketingFunnelsResponse(month=month, year=year, funnels=funnels)
