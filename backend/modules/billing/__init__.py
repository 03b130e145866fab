"""
Billing module.

Answers billing questions other modules need (is a payment method on file)
without exposing Stripe to them.

Public API:
- IPaymentMethodService: Interface for payment-method lookups
- SubscriptionStatus: Stripe subscription statuses
- Billing exceptions: BillingError, PaymentLookupError
"""

from .interfaces import IPaymentMethodService
from .models import SubscriptionStatus
from .exceptions import BillingError, PaymentLookupError

__all__ = [
    # Interface
    "IPaymentMethodService",
    # Models
    "SubscriptionStatus",
    # Exceptions
    "BillingError",
    "PaymentLookupError",
]
