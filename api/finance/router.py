"""
Finance tracking API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Store, get_store
from core.responses import SuccessResponse, acknowledge

from . import repository, schemas

router = APIRouter(prefix="/api/finance")


@router.get("", response_model=list[schemas.FinanceRecordResponse])
async def list_records(store: Store = Depends(get_store)) -> list[dict]:
    """
    All transactions, most recent first.
    """
    return await repository.list_records(store)


@router.post("")
async def create_record(
    request: schemas.CreateFinanceRecordRequest,
    store: Store = Depends(get_store),
) -> dict:
    row = await repository.create_record(
        store,
        user_id=request.user_id,
        description=request.description,
        amount=request.amount,
        record_type=request.type,
        category=request.category,
    )
    return {"id": int(row["id"]), **request.model_dump(mode="json", exclude_unset=True)}


@router.delete("/{record_id}", response_model=SuccessResponse)
async def delete_record(record_id: int, store: Store = Depends(get_store)) -> SuccessResponse:
    affected = await repository.delete_record(store, record_id)
    return acknowledge(affected, resource="finance record", resource_id=record_id)
