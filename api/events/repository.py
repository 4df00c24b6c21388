"""
Calendar event persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date

from core.db import Store, StoreError, affected_rows


async def list_events(store: Store) -> list[dict]:
    return await store.fetch_all(
        """
        SELECT id, user_id, title, event_date
        FROM events
        ORDER BY id ASC
        """
    )


async def create_event(store: Store, *, user_id: int, title: str, event_date: date) -> dict:
    row = await store.fetch_one(
        """
        INSERT INTO events (user_id, title, event_date)
        VALUES ($1, $2, $3)
        RETURNING id, title, event_date
        """,
        user_id,
        title,
        event_date,
    )
    if row is None:
        raise StoreError("Failed to create event.")
    return row


async def delete_event(store: Store, event_id: int) -> int:
    status = await store.execute(
        """
        DELETE FROM events
        WHERE id = $1
        """,
        event_id,
    )
    return affected_rows(status)
