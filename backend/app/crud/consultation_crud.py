# app/crud/consultation_crud.py
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CrudAccessor
from app.models.consultation import Consultation

consultations = CrudAccessor(Consultation)


async def get_user_consultations(session: AsyncSession, user_id: int) -> List[Consultation]:
    return await consultations.list(session, Consultation.user_id == user_id)


async def update_consultation_status(session: AsyncSession, consultation_id: int, status: str) -> bool:
    return await consultations.update(session, consultation_id, {"status": status})
