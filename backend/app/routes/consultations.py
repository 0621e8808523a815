# app/routes/consultations.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import consultation_crud
from app.middleware.rbac import get_current_user, is_admin
from app.models.user import User
from app.schemas.base import IdResponse, SuccessResponse
from app.schemas.consultations import ConsultationCreate, ConsultationOut, ConsultationStatusUpdate
from sustainhub.core.error_messages import ErrorResponses
from sustainhub.db.database import get_session

consultation_router = APIRouter(tags=["Consultations"])


# Request a consultation with a specialist
@consultation_router.post("/", response_model=IdResponse)
async def create_consultation(
    data: ConsultationCreate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    consultation = await consultation_crud.consultations.create(
        session, {**data.model_dump(), "user_id": user.id, "status": "pending"}
    )
    return {"success": True, "id": consultation.id}


@consultation_router.get("/mine", response_model=List[ConsultationOut])
async def get_my_consultations(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    return await consultation_crud.get_user_consultations(session, user.id)


# Admin: all consultations
@consultation_router.get("/", response_model=List[ConsultationOut])
async def list_consultations(
    admin: User = Depends(is_admin),
    session: AsyncSession = Depends(get_session),
):
    return await consultation_crud.consultations.list(session)


@consultation_router.patch("/{consultation_id}/status", response_model=SuccessResponse)
async def update_consultation_status(
    consultation_id: int,
    data: ConsultationStatusUpdate,
    admin: User = Depends(is_admin),
    session: AsyncSession = Depends(get_session),
):
    success = await consultation_crud.update_consultation_status(session, consultation_id, data.status)
    if not success:
        raise ErrorResponses.internal("Failed to update consultation status")
    return {"success": True}
