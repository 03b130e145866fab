"""
Billing module interface.

Other modules should depend on IPaymentMethodService, not the concrete
implementation. The trial module uses it to decide whether upsell prompts
are needed without knowing about Stripe.
"""

from typing import Protocol, Optional, runtime_checkable


@runtime_checkable
class IPaymentMethodService(Protocol):
    """Interface for payment-method lookups."""

    async def has_payment_method(self, customer_id: Optional[str]) -> bool:
        """
        Check whether a Stripe customer has at least one payment method on file.

        Args:
            customer_id: Stripe customer ID, or None if the user never reached checkout

        Returns:
            True if a payment method exists, False otherwise

        Raises:
            PaymentLookupError: If Stripe could not be reached
        """
        ...
