# app/schemas/services.py
import json
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from app.schemas.base import CamelModel

PriceType = Literal["hourly", "daily", "project"]


class ServiceCreate(CamelModel):
    title_pt: str = Field(..., min_length=1)
    title_en: str = Field(..., min_length=1)
    description_pt: str = Field(..., min_length=1)
    description_en: str = Field(..., min_length=1)
    specialist: str = Field(..., min_length=1, max_length=100)
    price: int = Field(..., ge=0)
    price_type: PriceType
    features: Optional[List[str]] = None
    available: bool = True


class ServiceUpdate(CamelModel):
    title_pt: Optional[str] = Field(None, min_length=1)
    title_en: Optional[str] = Field(None, min_length=1)
    description_pt: Optional[str] = Field(None, min_length=1)
    description_en: Optional[str] = Field(None, min_length=1)
    specialist: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[int] = Field(None, ge=0)
    price_type: Optional[PriceType] = None
    features: Optional[List[str]] = None
    available: Optional[bool] = None


class ServiceOut(CamelModel):
    id: int
    title_pt: str
    title_en: str
    description_pt: str
    description_en: str
    specialist: str
    price: int
    price_type: PriceType
    features: List[str] = []
    available: bool
    created_at: datetime
    updated_at: datetime

    @field_validator("features", mode="before")
    @classmethod
    def parse_features(cls, value):
        # stored as a JSON array in a text column
        if value is None:
            return []
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
            except ValueError:
                return [value]
            return parsed if isinstance(parsed, list) else [str(parsed)]
        return value
