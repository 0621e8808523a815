# app/routes/auth.py
from typing import Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.user_crud import upsert_user
from app.middleware.rbac import get_optional_user
from app.models.user import User
from app.schemas.base import SuccessResponse
from app.schemas.user import SessionRequest, UserOut
from app.utils.auth_utils import create_session_token, verify_identity_token
from sustainhub.core.config import settings
from sustainhub.db.database import get_session

auth_router = APIRouter(tags=["Auth"])


def _set_session_cookie(response: Response, token: str):
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        max_age=settings.SESSION_TTL_DAYS * 24 * 3600,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        path="/",
    )


# ------------------------
# Sign in (exchange provider ID token for a session cookie)
# ------------------------
@auth_router.post("/session", response_model=UserOut)
async def create_session(
    data: SessionRequest,
    response: Response,
    session: AsyncSession = Depends(get_session),
):
    identity = verify_identity_token(data.id_token)
    user = await upsert_user(session, **identity)

    token = create_session_token(
        user.open_id,
        name=identity.get("name"),
        email=identity.get("email"),
        login_method=identity.get("login_method"),
    )
    _set_session_cookie(response, token)
    return user


# ------------------------
# Current user (null when anonymous)
# ------------------------
@auth_router.get("/me", response_model=Optional[UserOut])
async def me(user: Optional[User] = Depends(get_optional_user)):
    return user


@auth_router.post("/logout", response_model=SuccessResponse)
async def logout(response: Response):
    response.delete_cookie(settings.SESSION_COOKIE_NAME, path="/")
    return {"success": True}
