"""
Revenue arithmetic for the dashboard cards.
"""

from decimal import Decimal
from typing import Optional

from .models import BarberProfile, BarberType


def percent_change(current: Optional[Decimal], previous: Optional[Decimal]) -> Optional[float]:
    """
    Percentage change from `previous` to `current`, rounded to 2 places.

    None when either value is missing or the baseline is zero.
    """
    if current is None or previous is None or previous == 0:
        return None
    change = (Decimal(current) - Decimal(previous)) / Decimal(previous) * 100
    return round(float(change), 2)


def effective_revenue(
    total: Optional[Decimal],
    tips: Optional[Decimal],
    profile: Optional[BarberProfile] = None,
) -> Decimal:
    """
    What the barber actually earned from a month's takings.

    Commission barbers with a known rate keep `total * rate + tips`;
    everyone else is credited the full total.
    """
    total = Decimal(total or 0)
    if (
        profile is not None
        and profile.is_barber
        and profile.barber_type == BarberType.COMMISSION
        and profile.commission_rate is not None
    ):
        return total * profile.commission_rate + Decimal(tips or 0)
    return total


def monthly_profit(
    final_revenue: Optional[Decimal],
    expenses: Optional[Decimal],
) -> Optional[Decimal]:
    """Revenue less expenses; None unless both were recorded for the month."""
    if final_revenue is None or expenses is None:
        return None
    return Decimal(final_revenue) - Decimal(expenses)
