"""
Billing module data models.
"""

from enum import Enum


class SubscriptionStatus(str, Enum):
    """Stripe subscription statuses the client distinguishes."""

    TRIALING = "trialing"
    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCELED = "canceled"
    INCOMPLETE = "incomplete"
