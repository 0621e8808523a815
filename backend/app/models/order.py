# app/models/order.py
from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from sustainhub.db.database import Base, utcnow

ORDER_STATUSES = ("pending", "processing", "shipped", "delivered", "cancelled")


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    total_amount = Column(Integer, nullable=False)
    status = Column(Enum(*ORDER_STATUSES, name="order_status"), default="pending", nullable=False)
    delivery_address = Column(Text, nullable=False)
    delivery_city = Column(String(100), nullable=False)
    delivery_phone = Column(String(20), nullable=False)
    payment_method = Column(String(50), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    items = relationship(
        "OrderItem",
        order_by="OrderItem.id",
        lazy="selectin",
        cascade="all, delete-orphan",
    )


class OrderItem(Base):
    """Line of an order.

    ``product_name`` and ``price`` are copied from the catalog when the order
    is placed; ``product_id`` is kept for reference only and carries no
    foreign key, so products can be edited or deleted without touching
    historical orders.
    """

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, nullable=False)
    product_name = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
