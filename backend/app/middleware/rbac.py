# app/middleware/rbac.py
from typing import Optional

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.user_crud import upsert_user
from app.models.user import User
from app.utils.auth_utils import decode_session_token
from sustainhub.core.config import settings
from sustainhub.core.error_messages import ErrorResponses
from sustainhub.db.database import get_session


async def get_optional_user(
    request: Request, session: AsyncSession = Depends(get_session)
) -> Optional[User]:
    """Public tier: resolve the caller if a session cookie is present."""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None

    try:
        payload = decode_session_token(token)
    except HTTPException:
        # stale or forged cookie: treat the caller as anonymous
        return None

    return await upsert_user(
        session,
        payload["sub"],
        name=payload.get("name"),
        email=payload.get("email"),
        login_method=payload.get("login_method"),
    )


async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise ErrorResponses.UNAUTHENTICATED
    return user


async def is_admin(user: User = Depends(get_current_user)) -> User:
    if user.role != "admin":
        raise ErrorResponses.ADMIN_ONLY
    return user
