"""
Realtime view of one user's recurring expenses.

Supabase realtime pushes INSERT/UPDATE/DELETE events for the
`recurring_expenses` table. Instead of re-running the full list query on
every event, the feed applies each row delta to its local copy and only
falls back to a full refetch when an event can't be applied (malformed
payload, or a row that doesn't belong to the feed's user).

Events are processed one at a time in arrival order. An UPDATE carrying an
older `updated_at` than the row already held is dropped as stale.
"""

import asyncio
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from pydantic import BaseModel, ValidationError as PydanticValidationError
from supabase import AsyncClient

from shared.database import create_async_supabase_client

from .models import RecurringExpense
from .repository import TABLE, ExpenseRepository

logger = logging.getLogger(__name__)

Refetch = Callable[[], Awaitable[list[RecurringExpense]]]

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class ChangeType(str, Enum):
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class ExpenseChange(BaseModel):
    """A normalized postgres change event."""

    type: ChangeType
    record: Optional[dict[str, Any]] = None
    old_record: Optional[dict[str, Any]] = None


def parse_change(payload: dict[str, Any]) -> Optional[ExpenseChange]:
    """
    Normalize a realtime payload.

    Accepts the Python client's shape (`{"data": {"type", "record",
    "old_record"}}`) as well as the JS client's (`{"eventType", "new",
    "old"}`). Returns None if the payload can't be understood.
    """
    data = payload.get("data", payload)
    if not isinstance(data, dict):
        return None

    event_type = data.get("type") or data.get("eventType")
    try:
        return ExpenseChange(
            type=event_type,
            record=data.get("record", data.get("new")) or None,
            old_record=data.get("old_record", data.get("old")) or None,
        )
    except PydanticValidationError:
        return None


def _sort_key(expense: RecurringExpense) -> datetime:
    return _stamp(expense.created_at)


def _stamp(value: Optional[datetime]) -> datetime:
    if value is None:
        return _EPOCH
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ExpenseFeed:
    """Local, delta-maintained list of a user's recurring expenses."""

    def __init__(self, user_id: str, refetch: Refetch):
        self.user_id = user_id
        self._refetch = refetch
        self._rows: dict[int, RecurringExpense] = {}
        self._deleted: set[int] = set()
        self._lock = asyncio.Lock()
        self.refetch_count = 0

    @property
    def expenses(self) -> list[RecurringExpense]:
        """Current rows, newest first."""
        return sorted(self._rows.values(), key=_sort_key, reverse=True)

    async def load(self) -> list[RecurringExpense]:
        """Replace local state with a full fetch."""
        rows = await self._refetch()
        self._rows = {row.id: row for row in rows}
        self._deleted -= self._rows.keys()
        self.refetch_count += 1
        return self.expenses

    def apply(self, change: ExpenseChange) -> bool:
        """
        Apply one change to local state.

        Returns:
            False if the change couldn't be applied and a refetch is needed
        """
        if change.type == ChangeType.DELETE:
            old = change.old_record or {}
            if "id" not in old:
                return False
            self._rows.pop(old["id"], None)
            self._deleted.add(old["id"])
            return True

        try:
            row = RecurringExpense.model_validate(change.record or {})
        except PydanticValidationError:
            return False

        if row.user_id != self.user_id:
            return False

        if row.id in self._deleted:
            logger.debug("Dropping late change for deleted recurring expense %s", row.id)
            return True

        current = self._rows.get(row.id)
        if (
            change.type == ChangeType.UPDATE
            and current is not None
            and _stamp(row.updated_at) < _stamp(current.updated_at)
        ):
            logger.debug("Dropping stale update for recurring expense %s", row.id)
            return True

        self._rows[row.id] = row
        return True

    async def handle(self, payload: dict[str, Any]) -> None:
        """Apply a raw realtime payload, refetching if it can't be applied."""
        async with self._lock:
            change = parse_change(payload)
            if change is not None and self.apply(change):
                return
            logger.info("Refetching recurring expenses for %s after unusable event", self.user_id)
            await self.load()


async def subscribe_expense_feed(client: AsyncClient, feed: ExpenseFeed):
    """
    Subscribe `feed` to realtime changes of its user's expenses.

    Returns the channel; pass it to `client.remove_channel` to stop.
    """
    tasks: set[asyncio.Task] = set()

    def on_change(payload: dict[str, Any]) -> None:
        task = asyncio.ensure_future(feed.handle(payload))
        tasks.add(task)
        task.add_done_callback(tasks.discard)

    await feed.load()
    channel = client.channel(f"realtime-recurring-{feed.user_id}")
    channel.on_postgres_changes(
        "*",
        schema="public",
        table=TABLE,
        filter=f"user_id=eq.{feed.user_id}",
        callback=on_change,
    )
    await channel.subscribe()
    return channel


async def open_expense_feed(user_id: str, repository: ExpenseRepository):
    """
    Build a feed for `user_id` backed by `repository` and subscribe it.

    The repository's blocking list query runs in a worker thread on each
    refetch. Returns `(feed, client, channel)`; the caller closes them.
    """

    async def refetch() -> list[RecurringExpense]:
        return await asyncio.to_thread(repository.list_for_user, user_id)

    client = await create_async_supabase_client()
    feed = ExpenseFeed(user_id, refetch)
    channel = await subscribe_expense_feed(client, feed)
    return feed, client, channel
