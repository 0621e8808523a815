# app/crud/engagement_crud.py
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.favorite import Favorite
from app.models.review import Review


# ------------------------
# Favorites
# ------------------------
async def get_user_favorites(session: AsyncSession, user_id: int) -> List[Favorite]:
    result = await session.execute(
        select(Favorite).where(Favorite.user_id == user_id).order_by(Favorite.created_at.desc(), Favorite.id.desc())
    )
    return list(result.scalars().all())


async def find_favorite(session: AsyncSession, user_id: int, item_type: str, item_id: int) -> Optional[Favorite]:
    result = await session.execute(
        select(Favorite).where(
            Favorite.user_id == user_id,
            Favorite.item_type == item_type,
            Favorite.item_id == item_id,
        )
    )
    return result.scalars().first()


async def add_favorite(session: AsyncSession, user_id: int, item_type: str, item_id: int) -> Favorite:
    existing = await find_favorite(session, user_id, item_type, item_id)
    if existing:
        return existing
    favorite = Favorite(user_id=user_id, item_type=item_type, item_id=item_id)
    session.add(favorite)
    await session.commit()
    return favorite


async def remove_favorite(session: AsyncSession, user_id: int, item_type: str, item_id: int) -> int:
    result = await session.execute(
        delete(Favorite).where(
            Favorite.user_id == user_id,
            Favorite.item_type == item_type,
            Favorite.item_id == item_id,
        )
    )
    await session.commit()
    return result.rowcount


# ------------------------
# Reviews
# ------------------------
async def get_product_reviews(session: AsyncSession, product_id: int) -> List[Review]:
    result = await session.execute(
        select(Review).where(Review.product_id == product_id).order_by(Review.created_at.desc(), Review.id.desc())
    )
    return list(result.scalars().all())


async def create_review(session: AsyncSession, **data) -> Review:
    review = Review(**data)
    session.add(review)
    await session.commit()
    return review


async def get_product_average_rating(session: AsyncSession, product_id: int):
    """Mean of the live review set; ``(None, 0)`` when nobody reviewed yet."""
    result = await session.execute(
        select(func.avg(Review.rating), func.count(Review.id)).where(Review.product_id == product_id)
    )
    average, count = result.one()
    if not count:
        return None, 0
    return round(float(average), 2), count
