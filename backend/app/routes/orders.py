# app/routes/orders.py
import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import order_crud, user_crud
from app.middleware.rbac import get_current_user, is_admin
from app.models.user import User
from app.schemas.base import SuccessResponse
from app.schemas.orders import OrderCreate, OrderCreated, OrderOut, OrderStatusUpdate
from app.utils.email_utils import mail_configured, order_status_email, send_email
from sustainhub.core.error_messages import ErrorResponses
from sustainhub.db.database import get_session
from sustainhub.service.order_service import DeliveryInfo, place_order, update_order_status

logger = logging.getLogger("sustainhub.orders")

order_router = APIRouter(tags=["Orders"])


@order_router.post("/", response_model=OrderCreated)
async def create_order(
    data: OrderCreate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    delivery = DeliveryInfo(
        address=data.delivery_address,
        city=data.delivery_city,
        phone=data.delivery_phone,
        payment_method=data.payment_method,
        notes=data.notes,
    )
    requested = [(item.product_id, item.quantity) for item in data.items]
    order_id = await place_order(session, user.id, delivery, requested)
    return {"success": True, "order_id": order_id}


# Current user's orders
@order_router.get("/mine", response_model=List[OrderOut])
async def get_user_orders(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    return await order_crud.get_user_orders(session, user.id)


# Admin: every order (dashboard analytics are computed client-side)
@order_router.get("/", response_model=List[OrderOut])
async def get_all_orders(
    admin: User = Depends(is_admin),
    session: AsyncSession = Depends(get_session),
):
    return await order_crud.get_all_orders(session)


@order_router.get("/{order_id}", response_model=OrderOut)
async def get_order(
    order_id: int,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    order = await order_crud.get_order(session, order_id)
    if not order:
        raise ErrorResponses.not_found("Order")

    # owner or admin only
    if order.user_id != user.id and user.role != "admin":
        raise ErrorResponses.NOT_AUTHORIZED
    return order


# Admin: update order status
@order_router.patch("/{order_id}/status", response_model=SuccessResponse)
async def update_status(
    order_id: int,
    data: OrderStatusUpdate,
    admin: User = Depends(is_admin),
    session: AsyncSession = Depends(get_session),
):
    previous = await update_order_status(session, order_id, data.status)
    if previous is None:
        raise ErrorResponses.internal("Failed to update order status")

    if previous != data.status:
        await notify_status_change(session, order_id, data.status)
    return {"success": True}


async def notify_status_change(session: AsyncSession, order_id: int, status: str):
    if not mail_configured():
        return

    order = await order_crud.get_order(session, order_id)
    owner = await user_crud.users.get(session, order.user_id) if order else None
    if not owner or not owner.email or not (owner.email_notifications and owner.order_updates):
        return

    subject, body = order_status_email(order_id, status, owner.language)
    try:
        await run_in_threadpool(send_email, owner.email, subject, body)
    except Exception as mail_err:
        logger.warning("Status email for order #%s failed, status kept: %s", order_id, mail_err)
