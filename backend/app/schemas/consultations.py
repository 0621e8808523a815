# app/schemas/consultations.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from app.schemas.base import CamelModel

ConsultationStatus = Literal["pending", "approved", "completed", "cancelled"]


class ConsultationCreate(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    scheduled_date: Optional[datetime] = None


class ConsultationOut(CamelModel):
    id: int
    user_id: int
    title: str
    description: str
    scheduled_date: Optional[datetime] = None
    status: ConsultationStatus
    created_at: datetime


class ConsultationStatusUpdate(CamelModel):
    status: ConsultationStatus
