"""
Question bank API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Store, get_store
from core.responses import SuccessResponse, acknowledge

from . import repository, schemas, service

router = APIRouter(prefix="/api/questions")


@router.get("", response_model=list[schemas.QuestionResponse])
async def list_questions(store: Store = Depends(get_store)) -> list[dict]:
    return await repository.list_questions(store)


@router.post("")
async def create_question(
    request: schemas.CreateQuestionRequest,
    store: Store = Depends(get_store),
) -> dict:
    return await service.create_question(store, request)


@router.put("/{question_id}/review", response_model=SuccessResponse)
async def review_question(
    question_id: int,
    request: schemas.ReviewQuestionRequest,
    store: Store = Depends(get_store),
) -> SuccessResponse:
    """
    Record a review: the question is next due `interval` days from now.
    """
    affected = await service.review_question(store, question_id, interval=request.interval)
    return acknowledge(affected, resource="question", resource_id=question_id)
