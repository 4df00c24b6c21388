"""
Notes persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Store, StoreError, affected_rows


async def list_notes(store: Store) -> list[dict]:
    return await store.fetch_all(
        """
        SELECT id, user_id, title, body, last_modified
        FROM notes
        ORDER BY last_modified DESC, id DESC
        """
    )


async def create_note(store: Store, *, user_id: int, title: str, body: str) -> dict:
    row = await store.fetch_one(
        """
        INSERT INTO notes (user_id, title, body)
        VALUES ($1, $2, $3)
        RETURNING id, title, body
        """,
        user_id,
        title,
        body,
    )
    if row is None:
        raise StoreError("Failed to create note.")
    return row


async def update_note(store: Store, note_id: int, *, title: str, body: str) -> int:
    status = await store.execute(
        """
        UPDATE notes
        SET title = $1, body = $2, last_modified = now()
        WHERE id = $3
        """,
        title,
        body,
        note_id,
    )
    return affected_rows(status)
