# app/schemas/orders.py
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from app.schemas.base import CamelModel

OrderStatus = Literal["pending", "processing", "shipped", "delivered", "cancelled"]


class OrderLineIn(CamelModel):
    product_id: int = Field(..., gt=0)
    quantity: int = Field(..., ge=1)
    # Accepted from the checkout draft but re-read from the catalog.
    product_name: Optional[str] = None
    price: Optional[int] = None


class OrderCreate(CamelModel):
    delivery_address: str = Field(..., min_length=1)
    delivery_city: str = Field(..., min_length=1, max_length=100)
    delivery_phone: str = Field(..., min_length=1, max_length=20)
    payment_method: str = Field(..., min_length=1, max_length=50)
    notes: Optional[str] = None
    items: List[OrderLineIn] = Field(default_factory=list)


class OrderCreated(CamelModel):
    success: bool = True
    order_id: int


class OrderItemOut(CamelModel):
    id: int
    order_id: int
    product_id: int
    product_name: str
    quantity: int
    price: int
    created_at: datetime


class OrderOut(CamelModel):
    id: int
    user_id: int
    total_amount: int
    status: OrderStatus
    delivery_address: str
    delivery_city: str
    delivery_phone: str
    payment_method: str
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    items: List[OrderItemOut] = []


class OrderStatusUpdate(CamelModel):
    status: OrderStatus
