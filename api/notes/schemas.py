"""
Notes API schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class NoteRequest(BaseModel):
    title: str = Field(..., max_length=500)
    body: str


class CreateNoteRequest(NoteRequest):
    user_id: int = 1


class NoteResponse(BaseModel):
    id: int
    user_id: int | None = None
    title: str
    body: str
    last_modified: datetime | None = None


class CreatedNoteResponse(BaseModel):
    id: int
    title: str
    body: str
