"""
Best-effort audit logging to `system_logs`.

Audit rows are a side effect of user actions. A failed write is logged and
dropped; it never rolls back or fails the action that triggered it.
"""

import logging
from typing import Optional

from supabase import Client

from .models import AuditAction, AuditEntry

logger = logging.getLogger(__name__)


class AuditLogService:
    """Appends rows to the `system_logs` table."""

    def __init__(self, supabase_client: Client):
        self._db = supabase_client

    async def record(
        self,
        source: str,
        action: AuditAction | str,
        status: str = "success",
        details: Optional[str] = None,
    ) -> bool:
        """
        Append an audit row.

        Returns:
            True if the row was written, False if the write failed
        """
        entry = AuditEntry(
            source=source,
            action=action.value if isinstance(action, AuditAction) else action,
            status=status,
            details=details,
        )
        try:
            self._db.table("system_logs").insert(entry.model_dump()).execute()
        except Exception:
            logger.warning(
                "Failed to write audit log %s for %s", entry.action, entry.source,
                exc_info=True,
            )
            return False
        return True
