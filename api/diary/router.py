"""
Diary (homework list) API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Store, get_store
from core.responses import SuccessResponse, acknowledge

from . import repository, schemas

router = APIRouter(prefix="/api/diary")


@router.get("", response_model=list[schemas.DiaryEntryResponse])
async def list_entries(store: Store = Depends(get_store)) -> list[dict]:
    """
    All entries, soonest due date first.
    """
    return await repository.list_entries(store)


@router.post("")
async def create_entry(
    request: schemas.CreateDiaryEntryRequest,
    store: Store = Depends(get_store),
) -> dict:
    row = await repository.create_entry(
        store,
        user_id=request.user_id,
        subject=request.subject,
        description=request.description,
        due_date=request.due_date,
        entry_type=request.type,
    )
    return {
        "id": int(row["id"]),
        **request.model_dump(mode="json", by_alias=True, exclude_unset=True),
    }


@router.put("/{entry_id}", response_model=SuccessResponse)
async def update_entry(
    entry_id: int,
    request: schemas.UpdateDiaryEntryRequest,
    store: Store = Depends(get_store),
) -> SuccessResponse:
    affected = await repository.set_completed(store, entry_id, completed=request.completed)
    return acknowledge(affected, resource="diary entry", resource_id=entry_id)


@router.delete("/{entry_id}", response_model=SuccessResponse)
async def delete_entry(entry_id: int, store: Store = Depends(get_store)) -> SuccessResponse:
    affected = await repository.delete_entry(store, entry_id)
    return acknowledge(affected, resource="diary entry", resource_id=entry_id)
