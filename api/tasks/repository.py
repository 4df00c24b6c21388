"""
Task persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Store, StoreError, affected_rows


async def list_tasks(store: Store) -> list[dict]:
    return await store.fetch_all(
        """
        SELECT id, user_id, text, completed, created_at
        FROM tasks
        ORDER BY created_at DESC, id DESC
        """
    )


async def create_task(store: Store, *, text: str, user_id: int) -> dict:
    row = await store.fetch_one(
        """
        INSERT INTO tasks (user_id, text)
        VALUES ($1, $2)
        RETURNING id, user_id, text, completed, created_at
        """,
        user_id,
        text,
    )
    if row is None:
        raise StoreError("Failed to create task.")
    return row


async def set_completed(store: Store, task_id: int, *, completed: bool) -> int:
    status = await store.execute(
        """
        UPDATE tasks
        SET completed = $1
        WHERE id = $2
        """,
        completed,
        task_id,
    )
    return affected_rows(status)


async def delete_task(store: Store, task_id: int) -> int:
    status = await store.execute(
        """
        DELETE FROM tasks
        WHERE id = $1
        """,
        task_id,
    )
    return affected_rows(status)
