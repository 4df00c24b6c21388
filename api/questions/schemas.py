"""
Question bank API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt

# 100 years; keeps the computed review date representable.
MAX_REVIEW_INTERVAL_DAYS = 36500


class CreateQuestionRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    subject: str = Field(..., min_length=1, max_length=200)
    topic: str = Field(..., max_length=200)
    question: str = Field(..., min_length=1)
    answer: str
    # Base64 data URL or raw base64; stored verbatim.
    image: str | None = None
    user_id: int = 1


class ReviewQuestionRequest(BaseModel):
    interval: StrictInt = Field(..., ge=0, le=MAX_REVIEW_INTERVAL_DAYS)


class QuestionResponse(BaseModel):
    id: int
    user_id: int | None = None
    subject: str
    topic: str
    question_text: str
    answer_text: str
    image_data: str | None = None
    next_review: datetime | None = None
    review_interval: int
