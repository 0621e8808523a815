# app/routes/seed.py
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.middleware.rbac import is_admin
from app.models.user import User
from app.seeds.seed_catalog import seed_catalog
from sustainhub.core.error_messages import ErrorResponses
from sustainhub.db.database import get_session

seed_router = APIRouter(tags=["Seed"])


@seed_router.post("/all")
async def seed_all(
    admin: User = Depends(is_admin),
    session: AsyncSession = Depends(get_session),
):
    try:
        await seed_catalog(session)
    except SQLAlchemyError:
        await session.rollback()
        raise ErrorResponses.internal("Failed to seed database")
    return {"success": True, "message": "Database seeded successfully!"}
