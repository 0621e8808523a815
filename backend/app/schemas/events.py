# app/schemas/events.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from app.schemas.base import CamelModel

EventStatus = Literal["upcoming", "ongoing", "completed", "cancelled"]


class EventCreate(CamelModel):
    title_pt: str = Field(..., min_length=1)
    title_en: str = Field(..., min_length=1)
    description_pt: str = Field(..., min_length=1)
    description_en: str = Field(..., min_length=1)
    event_date: datetime
    location: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    image_url: Optional[str] = None
    max_participants: Optional[int] = Field(None, gt=0)
    organizer_name: Optional[str] = Field(None, max_length=100)
    status: EventStatus = "upcoming"
    published: bool = False


class EventUpdate(CamelModel):
    title_pt: Optional[str] = Field(None, min_length=1)
    title_en: Optional[str] = Field(None, min_length=1)
    description_pt: Optional[str] = Field(None, min_length=1)
    description_en: Optional[str] = Field(None, min_length=1)
    event_date: Optional[datetime] = None
    location: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    image_url: Optional[str] = None
    max_participants: Optional[int] = Field(None, gt=0)
    organizer_name: Optional[str] = Field(None, max_length=100)
    status: Optional[EventStatus] = None
    published: Optional[bool] = None


class EventOut(CamelModel):
    id: int
    title_pt: str
    title_en: str
    description_pt: str
    description_en: str
    event_date: datetime
    location: str
    category: str
    image_url: Optional[str] = None
    max_participants: Optional[int] = None
    organizer_name: Optional[str] = None
    status: EventStatus
    published: bool
    created_at: datetime
    updated_at: datetime
