# app/schemas/product.py
from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel


class ProductCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: int = Field(..., ge=0, description="Price in MZN")
    category: str = Field(..., min_length=1, max_length=100)
    image_url: str = Field(..., min_length=1)
    stock: int = Field(0, ge=0)
    sustainability_score: int = Field(85, ge=0, le=100)


class ProductUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[int] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    image_url: Optional[str] = Field(None, min_length=1)
    stock: Optional[int] = Field(None, ge=0)
    sustainability_score: Optional[int] = Field(None, ge=0, le=100)


class ProductOut(CamelModel):
    id: int
    name: str
    description: str
    price: int
    category: str
    image_url: str
    stock: int
    sustainability_score: int
    created_at: datetime
