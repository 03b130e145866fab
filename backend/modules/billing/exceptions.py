"""
Billing module exceptions.

These exceptions are raised by the billing module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from typing import Optional

from shared.exceptions import ChairbookError, ExternalServiceError


class BillingError(ChairbookError):
    """Base exception for billing-related errors."""

    pass


class PaymentLookupError(BillingError, ExternalServiceError):
    """Raised when Stripe cannot be queried for a customer's payment methods."""

    def __init__(self, customer_id: str, stripe_error: Optional[str] = None):
        super().__init__(
            f"Could not look up payment methods for customer {customer_id}",
            service="stripe",
            code="PAYMENT_LOOKUP_FAILED",
            details={"customer_id": customer_id},
        )
        if stripe_error:
            self.details["stripe_error"] = stripe_error
