"""
Payment-method lookup against Stripe.

Only asks Stripe whether a payment method exists; card details are never
read or stored here.
"""

import logging
from typing import Optional

import stripe

from shared.config import get_settings

from .interfaces import IPaymentMethodService
from .exceptions import PaymentLookupError

logger = logging.getLogger(__name__)


class PaymentMethodService(IPaymentMethodService):
    """Stripe-backed implementation of IPaymentMethodService."""

    def __init__(self, api_key: Optional[str] = None):
        settings = get_settings()
        self._api_key = api_key if api_key is not None else settings.stripe_secret_key
        self._enabled = settings.enable_billing

    @property
    def is_configured(self) -> bool:
        return self._enabled and bool(self._api_key)

    async def has_payment_method(self, customer_id: Optional[str]) -> bool:
        """Check Stripe for any attached payment method."""
        if not customer_id:
            return False
        if not self.is_configured:
            logger.debug("Stripe not configured, treating %s as having no payment method", customer_id)
            return False

        try:
            methods = stripe.PaymentMethod.list(
                customer=customer_id,
                limit=1,
                api_key=self._api_key,
            )
        except stripe.StripeError as e:
            logger.warning("Stripe payment method lookup failed for %s: %s", customer_id, e)
            raise PaymentLookupError(customer_id, stripe_error=str(e)) from e

        return len(methods.data) > 0


# Module-level instance getter
_service_instance: Optional[PaymentMethodService] = None


def get_payment_method_service() -> PaymentMethodService:
    """Get the payment method service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = PaymentMethodService()
    return _service_instance


def reset_payment_method_service() -> None:
    """Reset the payment method service singleton (for testing)."""
    global _service_instance
    _service_instance = None
