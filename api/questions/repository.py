"""
Question bank persistence (raw SQL).
"""

from __future__ import annotations

from datetime import datetime

from core.db import Store, StoreError, affected_rows


async def list_questions(store: Store) -> list[dict]:
    return await store.fetch_all(
        """
        SELECT id, user_id, subject, topic, question_text, answer_text,
               image_data, next_review, review_interval
        FROM questions
        ORDER BY id ASC
        """
    )


async def create_question(
    store: Store,
    *,
    user_id: int,
    subject: str,
    topic: str,
    question_text: str,
    answer_text: str,
    image_data: str | None,
    next_review: datetime,
    review_interval: int,
) -> dict:
    row = await store.fetch_one(
        """
        INSERT INTO questions (user_id, subject, topic, question_text, answer_text,
                               image_data, next_review, review_interval)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
        RETURNING id
        """,
        user_id,
        subject,
        topic,
        question_text,
        answer_text,
        image_data,
        next_review,
        review_interval,
    )
    if row is None:
        raise StoreError("Failed to create question.")
    return row


async def schedule_review(
    store: Store,
    question_id: int,
    *,
    next_review: datetime,
    review_interval: int,
) -> int:
    status = await store.execute(
        """
        UPDATE questions
        SET next_review = $1, review_interval = $2
        WHERE id = $3
        """,
        next_review,
        review_interval,
        question_id,
    )
    return affected_rows(status)
