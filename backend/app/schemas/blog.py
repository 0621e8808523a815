# app/schemas/blog.py
from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel


class BlogPostCreate(CamelModel):
    title_pt: str = Field(..., min_length=1)
    title_en: str = Field(..., min_length=1)
    excerpt_pt: str = Field(..., min_length=1)
    excerpt_en: str = Field(..., min_length=1)
    content_pt: str = Field(..., min_length=1)
    content_en: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1, max_length=100)
    category: str = Field(..., min_length=1, max_length=100)
    image_url: str = Field(..., min_length=1)
    read_time: int = Field(..., gt=0, description="Minutes")
    published: bool = False


class BlogPostUpdate(CamelModel):
    title_pt: Optional[str] = Field(None, min_length=1)
    title_en: Optional[str] = Field(None, min_length=1)
    excerpt_pt: Optional[str] = Field(None, min_length=1)
    excerpt_en: Optional[str] = Field(None, min_length=1)
    content_pt: Optional[str] = Field(None, min_length=1)
    content_en: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    image_url: Optional[str] = Field(None, min_length=1)
    read_time: Optional[int] = Field(None, gt=0)
    published: Optional[bool] = None


class BlogPostOut(CamelModel):
    id: int
    title_pt: str
    title_en: str
    excerpt_pt: str
    excerpt_en: str
    content_pt: str
    content_en: str
    author: str
    category: str
    image_url: str
    read_time: int
    published: bool
    created_at: datetime
    updated_at: datetime
