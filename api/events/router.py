"""
Calendar event API endpoints. Events are created and deleted, never edited.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Store, get_store
from core.responses import SuccessResponse, acknowledge

from . import repository, schemas

router = APIRouter(prefix="/api/events")


@router.get("", response_model=list[schemas.EventResponse])
async def list_events(store: Store = Depends(get_store)) -> list[dict]:
    return await repository.list_events(store)


@router.post("", response_model=schemas.CreatedEventResponse)
async def create_event(
    request: schemas.CreateEventRequest,
    store: Store = Depends(get_store),
) -> schemas.CreatedEventResponse:
    row = await repository.create_event(
        store,
        user_id=request.user_id,
        title=request.title,
        event_date=request.date,
    )
    return schemas.CreatedEventResponse(id=int(row["id"]), title=request.title, event_date=request.date)


@router.delete("/{event_id}", response_model=SuccessResponse)
async def delete_event(event_id: int, store: Store = Depends(get_store)) -> SuccessResponse:
    affected = await repository.delete_event(store, event_id)
    return acknowledge(affected, resource="event", resource_id=event_id)
