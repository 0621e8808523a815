# sustainhub/service/order_service.py
"""Order placement and status lifecycle.

An order is written together with its line items and the caller's cart
clear in one transaction. Line names and prices always come from the
catalog at placement time and are copied onto the order items, so later
catalog edits never change an existing order.

Status changes are admin-driven. By default any status may follow any
other; with ``ORDER_STRICT_TRANSITIONS`` only the moves listed in
``ALLOWED_TRANSITIONS`` are accepted.
"""
import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.cart_item import CartItem
from app.models.order import ORDER_STATUSES, Order, OrderItem
from app.models.product import Product
from sustainhub.core.config import settings
from sustainhub.core.error_messages import ErrorResponses

logger = logging.getLogger("sustainhub.orders")

ALLOWED_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    "pending": frozenset({"processing", "cancelled"}),
    "processing": frozenset({"shipped", "cancelled"}),
    "shipped": frozenset({"delivered", "cancelled"}),
    "delivered": frozenset(),
    "cancelled": frozenset(),
}
TERMINAL_STATUSES = frozenset(s for s, nxt in ALLOWED_TRANSITIONS.items() if not nxt)


@dataclass
class OrderLine:
    product_id: int
    product_name: str
    quantity: int
    price: int

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity


@dataclass
class DeliveryInfo:
    address: str
    city: str
    phone: str
    payment_method: str
    notes: Optional[str] = None


def compute_total(lines: Iterable[OrderLine]) -> int:
    return sum(line.subtotal for line in lines)


def can_transition(current: str, new: str, strict: bool = False) -> bool:
    if new not in ORDER_STATUSES:
        return False
    if current == new or not strict:
        return True
    return new in ALLOWED_TRANSITIONS.get(current, frozenset())


async def _price_lines(session: AsyncSession, requested: Sequence[tuple]) -> List[OrderLine]:
    """One line per ``(product_id, quantity)`` pair, in submitted order."""
    product_ids = {product_id for product_id, _ in requested}
    result = await session.execute(select(Product).where(Product.id.in_(list(product_ids))))
    catalog = {p.id: p for p in result.scalars().all()}

    lines = []
    for product_id, quantity in requested:
        product = catalog.get(product_id)
        if product is None:
            raise ErrorResponses.not_found(f"Product {product_id}")
        lines.append(
            OrderLine(
                product_id=product.id,
                product_name=product.name,
                quantity=quantity,
                price=product.price,
            )
        )
    return lines


async def place_order(
    session: AsyncSession,
    user_id: int,
    delivery: DeliveryInfo,
    requested: Sequence[tuple] = (),
) -> int:
    """Create a pending order for ``user_id`` and return its id.

    ``requested`` holds ``(product_id, quantity)`` pairs from the checkout
    draft. When empty, the user's server cart is checked out instead.
    """
    try:
        async with session.begin():
            if not requested:
                result = await session.execute(
                    select(CartItem.product_id, CartItem.quantity)
                    .where(CartItem.user_id == user_id)
                    .order_by(CartItem.id)
                )
                requested = [tuple(row) for row in result.all()]
            if not requested:
                raise ErrorResponses.CART_EMPTY

            lines = await _price_lines(session, requested)
            order = Order(
                user_id=user_id,
                total_amount=compute_total(lines),
                status="pending",
                delivery_address=delivery.address,
                delivery_city=delivery.city,
                delivery_phone=delivery.phone,
                payment_method=delivery.payment_method,
                notes=delivery.notes or None,
            )
            session.add(order)
            await session.flush()

            session.add_all(
                OrderItem(
                    order_id=order.id,
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    price=line.price,
                )
                for line in lines
            )
            await session.execute(delete(CartItem).where(CartItem.user_id == user_id))
    except SQLAlchemyError:
        logger.exception("Order placement failed for user #%s", user_id)
        raise ErrorResponses.internal("Failed to create order")

    logger.info(
        "Order #%s placed by user #%s: %d line(s), total %s MZN",
        order.id, user_id, len(lines), order.total_amount,
    )
    return order.id


async def update_order_status(session: AsyncSession, order_id: int, new_status: str) -> Optional[str]:
    """Move an order to ``new_status``.

    Returns the previous status, or ``None`` when no order was updated.
    """
    result = await session.execute(select(Order.status).where(Order.id == order_id))
    current = result.scalar_one_or_none()
    if current is None:
        return None

    if not can_transition(current, new_status, strict=settings.ORDER_STRICT_TRANSITIONS):
        raise ErrorResponses.validation(f"Cannot move order from {current} to {new_status}")

    result = await session.execute(
        update(Order).where(Order.id == order_id).values(status=new_status)
    )
    await session.commit()
    if not result.rowcount:
        return None

    logger.info("Order #%s status %s -> %s", order_id, current, new_status)
    return current
