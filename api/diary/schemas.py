"""
Diary (homework) API schemas.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class CreateDiaryEntryRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    subject: str = Field(..., min_length=1, max_length=200)
    description: str
    due_date: date = Field(..., alias="dueDate")
    type: str = Field(..., min_length=1, max_length=50)
    user_id: int = 1


class UpdateDiaryEntryRequest(BaseModel):
    completed: bool


class DiaryEntryResponse(BaseModel):
    id: int
    user_id: int | None = None
    subject: str
    description: str
    due_date: date
    type: str
    completed: bool
