# app/routes/profile.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.user_crud import update_profile, users
from app.middleware.rbac import get_current_user
from app.models.user import User
from app.schemas.base import UploadRequest, UploadResponse
from app.schemas.user import ProfileUpdate, UserOut
from app.utils.storage_utils import upload_base64_image
from sustainhub.db.database import get_session

profile_router = APIRouter(tags=["Profile"])

@profile_router.get("/", response_model=UserOut)
async def get_profile(user: User = Depends(get_current_user)):
    return user


@profile_router.patch("/", response_model=UserOut)
async def update_my_profile(
    data: ProfileUpdate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    # omitted fields keep their value; text fields may be cleared with null
    changes = users.writable(data.model_dump(exclude_unset=True))
    return await update_profile(session, user, changes)


@profile_router.post("/picture", response_model=UploadResponse)
async def upload_profile_picture(
    data: UploadRequest,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    uploaded = await upload_base64_image(
        data.file, data.filename, data.content_type, folder="profiles", prefix=f"{user.id}-"
    )
    await update_profile(session, user, {"profile_picture": uploaded["url"]})
    return uploaded


# Welcome flow finished
@profile_router.post("/welcome", response_model=UserOut)
async def complete_welcome(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    return await update_profile(session, user, {"is_first_login": False})
