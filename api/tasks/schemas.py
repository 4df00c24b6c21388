"""
Task API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class CreateTaskRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=2000)
    user_id: int = 1


class UpdateTaskRequest(BaseModel):
    completed: bool


class TaskResponse(BaseModel):
    id: int
    user_id: int | None = None
    text: str
    completed: bool
    created_at: datetime | None = None


class CreatedTaskResponse(BaseModel):
    id: int
    text: str
    completed: bool = False
