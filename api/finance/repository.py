"""
Finance persistence (raw SQL).
"""

from __future__ import annotations

from decimal import Decimal

from core.db import Store, StoreError, affected_rows


async def list_records(store: Store) -> list[dict]:
    return await store.fetch_all(
        """
        SELECT id, user_id, description, amount, type, category, transaction_date
        FROM finance
        ORDER BY transaction_date DESC, id DESC
        """
    )


async def create_record(
    store: Store,
    *,
    user_id: int,
    description: str,
    amount: float,
    record_type: str,
    category: str,
) -> dict:
    row = await store.fetch_one(
        """
        INSERT INTO finance (user_id, description, amount, type, category)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING id
        """,
        user_id,
        description,
        # NUMERIC column; going through str() keeps 0.1 as 0.1.
        Decimal(str(amount)),
        record_type,
        category,
    )
    if row is None:
        raise StoreError("Failed to create finance record.")
    return row


async def delete_record(store: Store, record_id: int) -> int:
    status = await store.execute(
        """
        DELETE FROM finance
        WHERE id = $1
        """,
        record_id,
    )
    return affected_rows(status)
