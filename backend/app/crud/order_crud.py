# app/crud/order_crud.py
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.order import Order

NEWEST_FIRST = (Order.created_at.desc(), Order.id.desc())


async def get_order(session: AsyncSession, order_id: int) -> Optional[Order]:
    result = await session.execute(select(Order).where(Order.id == order_id))
    return result.scalars().first()


async def get_user_orders(session: AsyncSession, user_id: int) -> List[Order]:
    result = await session.execute(
        select(Order).where(Order.user_id == user_id).order_by(*NEWEST_FIRST)
    )
    return list(result.scalars().all())


async def get_all_orders(session: AsyncSession) -> List[Order]:
    result = await session.execute(select(Order).order_by(*NEWEST_FIRST))
    return list(result.scalars().all())
