"""
Audit log models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class AuditAction(str, Enum):
    """Actions recorded in `system_logs`."""

    EXPENSE_ADDED = "expense_added"
    EXPENSE_EDITED = "expense_edited"
    EXPENSE_DELETED = "expense_deleted"


class AuditEntry(BaseModel):
    """A `system_logs` row."""

    source: str = Field(..., description="User ID that triggered the action")
    action: str = Field(..., description="Action name")
    status: str = Field(default="success", description="Outcome of the action")
    details: Optional[str] = Field(None, description="Free-form description")
