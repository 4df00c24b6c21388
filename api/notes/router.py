"""
Notes API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Store, get_store
from core.responses import SuccessResponse, acknowledge

from . import repository, schemas

router = APIRouter(prefix="/api/notes")


@router.get("", response_model=list[schemas.NoteResponse])
async def list_notes(store: Store = Depends(get_store)) -> list[dict]:
    """
    All notes, most recently edited first.
    """
    return await repository.list_notes(store)


@router.post("", response_model=schemas.CreatedNoteResponse)
async def create_note(
    request: schemas.CreateNoteRequest,
    store: Store = Depends(get_store),
) -> schemas.CreatedNoteResponse:
    row = await repository.create_note(
        store,
        user_id=request.user_id,
        title=request.title,
        body=request.body,
    )
    return schemas.CreatedNoteResponse(id=int(row["id"]), title=request.title, body=request.body)


@router.put("/{note_id}", response_model=SuccessResponse)
async def update_note(
    note_id: int,
    request: schemas.NoteRequest,
    store: Store = Depends(get_store),
) -> SuccessResponse:
    affected = await repository.update_note(store, note_id, title=request.title, body=request.body)
    return acknowledge(affected, resource="note", resource_id=note_id)
