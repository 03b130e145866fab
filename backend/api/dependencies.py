"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.audit.service import AuditLogService
    from modules.billing.interfaces import IPaymentMethodService
    from modules.expenses.interfaces import IExpenseService
    from modules.expenses.repository import ExpenseRepository
    from modules.metrics.interfaces import IMetricsService
    from modules.trial.interfaces import ITrialService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._payment_service: "IPaymentMethodService | None" = None
        self._trial_service: "ITrialService | None" = None
        self._audit_service: "AuditLogService | None" = None
        self._expense_repository: "ExpenseRepository | None" = None
        self._expense_service: "IExpenseService | None" = None
        self._metrics_service: "IMetricsService | None" = None

    @property
    def payments(self) -> "IPaymentMethodService":
        """Get the payment method lookup service."""
        if self._payment_service is None:
            from modules.billing.service import get_payment_method_service
            self._payment_service = get_payment_method_service()
        return self._payment_service

    @property
    def trial(self) -> "ITrialService":
        """Get the trial service instance."""
        if self._trial_service is None:
            from modules.trial.service import TrialService
            from shared.database import get_supabase_client
            self._trial_service = TrialService(get_supabase_client(), self.payments)
        return self._trial_service

    @property
    def audit(self) -> "AuditLogService":
        """Get the audit log writer."""
        if self._audit_service is None:
            from modules.audit.service import AuditLogService
            from shared.database import get_supabase_client
            self._audit_service = AuditLogService(get_supabase_client())
        return self._audit_service

    @property
    def expense_repository(self) -> "ExpenseRepository":
        """Get the recurring expense repository instance."""
        if self._expense_repository is None:
            from modules.expenses.repository import ExpenseRepository
            from shared.database import get_supabase_client
            self._expense_repository = ExpenseRepository(get_supabase_client())
        return self._expense_repository

    @property
    def expenses(self) -> "IExpenseService":
        """Get the recurring expense service instance."""
        if self._expense_service is None:
            from modules.expenses.service import ExpenseService
            from shared.config import get_settings
            self._expense_service = ExpenseService(
                repository=self.expense_repository,
                audit=self.audit,
                page_size=get_settings().expenses_page_size,
            )
        return self._expense_service

    @property
    def metrics(self) -> "IMetricsService":
        """Get the dashboard metrics service instance."""
        if self._metrics_service is None:
            from modules.metrics.service import MetricsService
            from shared.config import get_settings
            from shared.database import get_supabase_client
            self._metrics_service = MetricsService(
                get_supabase_client(),
                top_n=get_settings().funnels_top_n,
            )
        return self._metrics_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._payment_service = None
        self._trial_service = None
        self._audit_service = None
        self._expense_repository = None
        self._expense_service = None
        self._metrics_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_payment_method_service() -> "IPaymentMethodService":
    """FastAPI dependency for payment method lookups."""
    return get_container().payments


def get_trial_service() -> "ITrialService":
    """FastAPI dependency for trial service."""
    return get_container().trial


def get_expense_service() -> "IExpenseService":
    """FastAPI dependency for recurring expense service."""
    return get_container().expenses


def get_metrics_service() -> "IMetricsService":
    """FastAPI dependency for dashboard metrics service."""
    return get_container().metrics
