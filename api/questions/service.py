"""
Question bank business logic.

Review scheduling: the next review is "now" plus the
interval the client picked. There is no ease factor and no history; each
review overwrites the previous interval.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from core.db import Store

from . import repository, schemas

INITIAL_REVIEW_INTERVAL_DAYS = 1


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def next_review_after(interval_days: int, *, now: datetime | None = None) -> datetime:
    return (now or _utc_now()) + timedelta(days=interval_days)


async def create_question(store: Store, payload: schemas.CreateQuestionRequest) -> dict:
    """
    Insert a question that is first due one day from now.

    Returns the request fields the client sent, plus the new id.
    """
    row = await repository.create_question(
        store,
        user_id=payload.user_id,
        subject=payload.subject,
        topic=payload.topic,
        question_text=payload.question,
        answer_text=payload.answer,
        image_data=payload.image,
        next_review=next_review_after(INITIAL_REVIEW_INTERVAL_DAYS),
        review_interval=INITIAL_REVIEW_INTERVAL_DAYS,
    )
    return {"id": int(row["id"]), **payload.model_dump(mode="json", exclude_unset=True)}


async def review_question(store: Store, question_id: int, *, interval: int) -> int:
    return await repository.schedule_review(
        store,
        question_id,
        next_review=next_review_after(interval),
        review_interval=interval,
    )
