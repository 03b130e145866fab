"""Tests for billing module interfaces."""

from modules.billing.interfaces import IPaymentMethodService
from modules.billing.service import PaymentMethodService


class TestIPaymentMethodService:
    def test_protocol_is_runtime_checkable(self):
        """PaymentMethodService should satisfy the protocol."""
        service = PaymentMethodService(api_key="sk_test")
        assert isinstance(service, IPaymentMethodService)

    def test_plain_object_does_not_satisfy(self):
        assert not isinstance(object(), IPaymentMethodService)
