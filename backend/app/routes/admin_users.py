# app/routes/admin_users.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import user_crud
from app.middleware.rbac import is_admin
from app.schemas.base import SuccessResponse
from app.schemas.user import AdminUserCreate, AdminUserUpdate, UserOut
from sustainhub.core.error_messages import ErrorResponses
from sustainhub.db.database import get_session

admin_users_router = APIRouter(tags=["Admin: Users"], dependencies=[Depends(is_admin)])


@admin_users_router.get("/", response_model=List[UserOut])
async def list_users(session: AsyncSession = Depends(get_session)):
    return await user_crud.list_users(session)


@admin_users_router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: int, session: AsyncSession = Depends(get_session)):
    user = await user_crud.users.get(session, user_id)
    if not user:
        raise ErrorResponses.not_found("User")
    return user


# Pre-provision a user (e.g. grant admin before their first sign-in)
@admin_users_router.post("/", response_model=UserOut)
async def create_user(data: AdminUserCreate, session: AsyncSession = Depends(get_session)):
    if await user_crud.get_user_by_open_id(session, data.open_id):
        raise ErrorResponses.validation("A user with this openId already exists")
    try:
        return await user_crud.create_user(session, data.model_dump())
    except IntegrityError:
        raise ErrorResponses.validation("A user with this openId already exists")


@admin_users_router.patch("/{user_id}", response_model=SuccessResponse)
async def update_user(user_id: int, data: AdminUserUpdate, session: AsyncSession = Depends(get_session)):
    changes = user_crud.users.writable(data.model_dump(exclude_unset=True))
    success = await user_crud.update_user(session, user_id, changes)
    if not success:
        raise ErrorResponses.internal("Failed to update user")
    return {"success": True}


@admin_users_router.delete("/{user_id}", response_model=SuccessResponse)
async def delete_user(user_id: int, session: AsyncSession = Depends(get_session)):
    try:
        success = await user_crud.delete_user(session, user_id)
    except SQLAlchemyError:
        # still referenced by orders, reviews, ...
        await session.rollback()
        success = False
    if not success:
        raise ErrorResponses.internal("Failed to delete user")
    return {"success": True}
