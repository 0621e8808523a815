# app/schemas/engagement.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from app.schemas.base import CamelModel
from app.schemas.product import ProductOut

ItemType = Literal["product", "blog"]


# ------------------------
# Favorites
# ------------------------
class FavoriteIn(CamelModel):
    item_type: ItemType
    item_id: int = Field(..., gt=0)


class FavoriteOut(CamelModel):
    id: int
    user_id: int
    item_type: ItemType
    item_id: int
    created_at: datetime


class FavoriteCheck(CamelModel):
    favorited: bool


# ------------------------
# Reviews
# ------------------------
class ReviewCreate(CamelModel):
    product_id: int = Field(..., gt=0)
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None


class ReviewOut(CamelModel):
    id: int
    user_id: int
    product_id: int
    rating: int
    comment: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class AverageRating(CamelModel):
    product_id: int
    average: Optional[float] = None
    count: int = 0


# ------------------------
# Cart
# ------------------------
class CartAdd(CamelModel):
    product_id: int = Field(..., gt=0)
    quantity: int = Field(1, ge=1)


class CartQuantityUpdate(CamelModel):
    quantity: int = Field(..., ge=1)


class CartItemOut(CamelModel):
    id: int
    user_id: int
    product_id: int
    quantity: int
    created_at: datetime
    updated_at: datetime
    product: Optional[ProductOut] = None


# ------------------------
# Search
# ------------------------
class SearchResult(CamelModel):
    id: int
    title: str
    category: str
    type: Literal["marketplace", "blog", "services"]
    href: str
