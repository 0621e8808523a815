# app/routes/engagement.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import cart_crud, engagement_crud
from app.crud.catalog_crud import blog_posts, products
from app.middleware.rbac import get_current_user
from app.models.user import User
from app.schemas.base import SuccessResponse
from app.schemas.engagement import (
    AverageRating,
    CartAdd,
    CartItemOut,
    CartQuantityUpdate,
    FavoriteCheck,
    FavoriteIn,
    FavoriteOut,
    ReviewCreate,
    ReviewOut,
)
from sustainhub.core.error_messages import ErrorResponses
from sustainhub.db.database import get_session

favorites_router = APIRouter(tags=["Favorites"])
reviews_router = APIRouter(tags=["Reviews"])
cart_router = APIRouter(tags=["Cart"])


# ------------------------
# Favorites
# ------------------------
@favorites_router.get("/", response_model=List[FavoriteOut])
async def list_favorites(user: User = Depends(get_current_user), session: AsyncSession = Depends(get_session)):
    return await engagement_crud.get_user_favorites(session, user.id)


@favorites_router.post("/", response_model=FavoriteOut)
async def add_favorite(
    data: FavoriteIn,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    accessor = products if data.item_type == "product" else blog_posts
    if not await accessor.get(session, data.item_id):
        raise ErrorResponses.not_found("Product" if data.item_type == "product" else "Blog post")
    return await engagement_crud.add_favorite(session, user.id, data.item_type, data.item_id)


@favorites_router.post("/remove", response_model=SuccessResponse)
async def remove_favorite(
    data: FavoriteIn,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    await engagement_crud.remove_favorite(session, user.id, data.item_type, data.item_id)
    return {"success": True}


@favorites_router.post("/check", response_model=FavoriteCheck)
async def check_favorite(
    data: FavoriteIn,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    favorite = await engagement_crud.find_favorite(session, user.id, data.item_type, data.item_id)
    return {"favorited": favorite is not None}


# ------------------------
# Reviews
# ------------------------
@reviews_router.get("/product/{product_id}", response_model=List[ReviewOut])
async def list_reviews(product_id: int, session: AsyncSession = Depends(get_session)):
    return await engagement_crud.get_product_reviews(session, product_id)


@reviews_router.get("/product/{product_id}/average", response_model=AverageRating)
async def average_rating(product_id: int, session: AsyncSession = Depends(get_session)):
    average, count = await engagement_crud.get_product_average_rating(session, product_id)
    return {"product_id": product_id, "average": average, "count": count}


@reviews_router.post("/", response_model=ReviewOut)
async def create_review(
    data: ReviewCreate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    if not await products.get(session, data.product_id):
        raise ErrorResponses.not_found("Product")
    return await engagement_crud.create_review(
        session,
        user_id=user.id,
        product_id=data.product_id,
        rating=data.rating,
        comment=data.comment or None,
    )


# ------------------------
# Cart
# ------------------------
@cart_router.get("/", response_model=List[CartItemOut])
async def get_cart(user: User = Depends(get_current_user), session: AsyncSession = Depends(get_session)):
    return await cart_crud.get_user_cart(session, user.id)


@cart_router.post("/", response_model=CartItemOut)
async def add_to_cart(
    data: CartAdd,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    if not await products.get(session, data.product_id):
        raise ErrorResponses.not_found("Product")
    return await cart_crud.add_to_cart(session, user.id, data.product_id, data.quantity)


@cart_router.patch("/{cart_item_id}", response_model=CartItemOut)
async def update_cart_quantity(
    cart_item_id: int,
    data: CartQuantityUpdate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    item = await cart_crud.get_cart_item(session, user.id, cart_item_id)
    if not item:
        raise ErrorResponses.not_found("Cart item")
    return await cart_crud.update_cart_item_quantity(session, item, data.quantity)


@cart_router.delete("/{cart_item_id}", response_model=SuccessResponse)
async def remove_from_cart(
    cart_item_id: int,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    item = await cart_crud.get_cart_item(session, user.id, cart_item_id)
    if not item:
        raise ErrorResponses.not_found("Cart item")
    await cart_crud.remove_from_cart(session, item)
    return {"success": True}


@cart_router.delete("/", response_model=SuccessResponse)
async def clear_cart(user: User = Depends(get_current_user), session: AsyncSession = Depends(get_session)):
    await cart_crud.clear_cart(session, user.id)
    return {"success": True}
