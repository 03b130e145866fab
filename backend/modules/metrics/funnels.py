"""
Marketing funnel aggregation.

Groups a month's new clients by the booking source of their first visit,
computes per-source retention and folds the long tail into "Other".
"""

from typing import Any, Iterable

from shared.dates import month_index, parse_ymd

from .models import MarketingFunnel

EXCLUDED_SOURCES = frozenset({"Unknown", "Returning Client", "No Source"})
OTHER_SOURCE = "Other"


def _retention(funnel: MarketingFunnel) -> float:
    if funnel.new_clients <= 0:
        return 0.0
    return funnel.new_clients_retained / funnel.new_clients * 100


def aggregate_marketing_funnels(
    clients: Iterable[dict[str, Any]],
    month: str,
    year: int,
    top_n: int = 4,
) -> list[MarketingFunnel]:
    """
    Build per-source funnels for clients whose first visit fell in the month.

    A client counts as retained when their second appointment is in the
    same month. Sources are ranked by new clients; the top `top_n` are kept
    and the rest are summed into a single "Other" bucket whose average
    ticket is the mean of the folded sources.

    Args:
        clients: `acuity_clients` rows with first_appt, second_appt, first_source
        month: Month name
        year: Calendar year
        top_n: Number of sources to keep before folding
    """
    target = month_index(month) + 1
    by_source: dict[str, MarketingFunnel] = {}

    for client in clients:
        source = client.get("first_source") or "Unknown"
        if source in EXCLUDED_SOURCES:
            continue

        first = parse_ymd(client.get("first_appt"))
        if first is None or first.year != year or first.month != target:
            continue

        funnel = by_source.setdefault(source, MarketingFunnel(source=source))
        funnel.new_clients += 1

        second = parse_ymd(client.get("second_appt"))
        if second is not None and second.year == year and second.month == target:
            funnel.new_clients_retained += 1

    funnels = sorted(by_source.values(), key=lambda f: f.new_clients, reverse=True)
    for funnel in funnels:
        funnel.retention = _retention(funnel)

    top, rest = funnels[:top_n], funnels[top_n:]
    if rest:
        other = MarketingFunnel(
            source=OTHER_SOURCE,
            new_clients=sum(f.new_clients for f in rest),
            returning_clients=sum(f.returning_clients for f in rest),
            new_clients_retained=sum(f.new_clients_retained for f in rest),
            avg_ticket=sum(f.avg_ticket for f in rest) / len(rest),
        )
        other.retention = _retention(other)
        top.append(other)

    return top
