# app/crud/user_crud.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CrudAccessor
from app.models.user import User
from sustainhub.core.config import settings
from sustainhub.db.database import utcnow

logger = logging.getLogger("sustainhub.users")

users = CrudAccessor(User)

IDENTITY_FIELDS = ("name", "email", "login_method")


async def get_user_by_open_id(session: AsyncSession, open_id: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.open_id == open_id).limit(1))
    return result.scalars().first()


async def upsert_user(session: AsyncSession, open_id: str, **identity: Any) -> User:
    """Insert the user on first contact, otherwise refresh identity fields.

    ``last_signed_in`` is bumped either way. The configured owner is always
    stored as admin; everyone else keeps the role already on their row.
    """
    if not open_id:
        raise ValueError("open_id is required for upsert")

    values = {k: identity[k] for k in IDENTITY_FIELDS if identity.get(k) is not None}
    values["last_signed_in"] = utcnow()
    if settings.OWNER_OPEN_ID and open_id == settings.OWNER_OPEN_ID:
        values["role"] = "admin"

    user = await get_user_by_open_id(session, open_id)
    if user is None:
        user = User(open_id=open_id, **values)
        session.add(user)
        try:
            await session.commit()
            logger.info("New user #%s signed in via %s", user.id, values.get("login_method"))
            return user
        except IntegrityError:
            # another request inserted the same open_id first
            await session.rollback()
            user = await get_user_by_open_id(session, open_id)
            if user is None:
                raise

    for key, value in values.items():
        setattr(user, key, value)
    await session.commit()
    return user


async def list_users(session: AsyncSession) -> List[User]:
    return await users.list(session)


async def create_user(session: AsyncSession, data: Dict[str, Any]) -> User:
    return await users.create(session, data)


async def update_user(session: AsyncSession, user_id: int, data: Dict[str, Any]) -> bool:
    return await users.update(session, user_id, data)


async def update_profile(session: AsyncSession, user: User, data: Dict[str, Any]) -> User:
    for key, value in data.items():
        setattr(user, key, value)
    await session.commit()
    return user


async def delete_user(session: AsyncSession, user_id: int) -> bool:
    return await users.delete(session, user_id)
