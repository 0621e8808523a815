# app/crud/cart_crud.py
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.cart_item import CartItem


async def get_user_cart(session: AsyncSession, user_id: int) -> List[CartItem]:
    result = await session.execute(
        select(CartItem).where(CartItem.user_id == user_id).order_by(CartItem.created_at, CartItem.id)
    )
    return list(result.scalars().all())


async def get_cart_item(session: AsyncSession, user_id: int, cart_item_id: int) -> Optional[CartItem]:
    result = await session.execute(
        select(CartItem).where(CartItem.id == cart_item_id, CartItem.user_id == user_id)
    )
    return result.scalars().first()


async def add_to_cart(session: AsyncSession, user_id: int, product_id: int, quantity: int) -> CartItem:
    result = await session.execute(
        select(CartItem).where(CartItem.user_id == user_id, CartItem.product_id == product_id)
    )
    item = result.scalars().first()
    if item:
        item.quantity += quantity
    else:
        item = CartItem(user_id=user_id, product_id=product_id, quantity=quantity)
        session.add(item)
    await session.commit()

    # reload with the product attached
    result = await session.execute(
        select(CartItem).where(CartItem.id == item.id).execution_options(populate_existing=True)
    )
    return result.scalars().one()


async def update_cart_item_quantity(session: AsyncSession, item: CartItem, quantity: int) -> CartItem:
    item.quantity = quantity
    await session.commit()
    return item


async def remove_from_cart(session: AsyncSession, item: CartItem) -> None:
    await session.delete(item)
    await session.commit()


async def clear_cart(session: AsyncSession, user_id: int, commit: bool = True) -> int:
    result = await session.execute(delete(CartItem).where(CartItem.user_id == user_id))
    if commit:
        await session.commit()
    return result.rowcount
