# app/schemas/news.py
from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel


class NewsCreate(CamelModel):
    title_pt: str = Field(..., min_length=1)
    title_en: str = Field(..., min_length=1)
    summary_pt: str = Field(..., min_length=1)
    summary_en: str = Field(..., min_length=1)
    content_pt: str = Field(..., min_length=1)
    content_en: str = Field(..., min_length=1)
    source: Optional[str] = Field(None, max_length=200)
    author: Optional[str] = Field(None, max_length=100)
    category: str = Field(..., min_length=1, max_length=100)
    image_url: Optional[str] = None
    published_at: Optional[datetime] = None
    published: bool = False


class NewsUpdate(CamelModel):
    title_pt: Optional[str] = Field(None, min_length=1)
    title_en: Optional[str] = Field(None, min_length=1)
    summary_pt: Optional[str] = Field(None, min_length=1)
    summary_en: Optional[str] = Field(None, min_length=1)
    content_pt: Optional[str] = Field(None, min_length=1)
    content_en: Optional[str] = Field(None, min_length=1)
    source: Optional[str] = Field(None, max_length=200)
    author: Optional[str] = Field(None, max_length=100)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    image_url: Optional[str] = None
    published_at: Optional[datetime] = None
    published: Optional[bool] = None


class NewsOut(CamelModel):
    id: int
    title_pt: str
    title_en: str
    summary_pt: str
    summary_en: str
    content_pt: str
    content_en: str
    source: Optional[str] = None
    author: Optional[str] = None
    category: str
    image_url: Optional[str] = None
    published_at: Optional[datetime] = None
    published: bool
    created_at: datetime
    updated_at: datetime
