"""
Calendar event API schemas.
"""

from __future__ import annotations

import datetime

from pydantic import BaseModel, Field


class CreateEventRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    date: datetime.date
    user_id: int = 1


class EventResponse(BaseModel):
    id: int
    user_id: int | None = None
    title: str
    event_date: datetime.date


class CreatedEventResponse(BaseModel):
    id: int
    title: str
    event_date: datetime.date
