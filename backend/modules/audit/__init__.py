"""
Audit module.

Writes best-effort `system_logs` rows after user-initiated mutations.
"""

from .models import AuditAction, AuditEntry
from .service import AuditLogService

__all__ = [
    "AuditAction",
    "AuditEntry",
    "AuditLogService",
]
