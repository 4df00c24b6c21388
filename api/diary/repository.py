"""
Diary persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date

from core.db import Store, StoreError, affected_rows


async def list_entries(store: Store) -> list[dict]:
    return await store.fetch_all(
        """
        SELECT id, user_id, subject, description, due_date, type, completed
        FROM diary
        ORDER BY due_date ASC, id ASC
        """
    )


async def create_entry(
    store: Store,
    *,
    user_id: int,
    subject: str,
    description: str,
    due_date: date,
    entry_type: str,
) -> dict:
    row = await store.fetch_one(
        """
        INSERT INTO diary (user_id, subject, description, due_date, type)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING id
        """,
        user_id,
        subject,
        description,
        due_date,
        entry_type,
    )
    if row is None:
        raise StoreError("Failed to create diary entry.")
    return row


async def set_completed(store: Store, entry_id: int, *, completed: bool) -> int:
    status = await store.execute(
        """
        UPDATE diary
        SET completed = $1
        WHERE id = $2
        """,
        completed,
        entry_id,
    )
    return affected_rows(status)


async def delete_entry(store: Store, entry_id: int) -> int:
    status = await store.execute(
        """
        DELETE FROM diary
        WHERE id = $1
        """,
        entry_id,
    )
    return affected_rows(status)
