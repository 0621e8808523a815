# app/crud/base.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger("sustainhub.crud")


class CrudAccessor:
    """list/get/create/update/delete over one table.

    ``update`` writes only the supplied keys; ``update`` and ``delete`` report
    whether any row was affected.
    """

    def __init__(self, model, order_by=None):
        self.model = model
        self.order_by = order_by if order_by is not None else (model.created_at.desc(), model.id.desc())

    @property
    def name(self) -> str:
        return self.model.__tablename__

    def writable(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Drop explicit nulls aimed at NOT NULL columns; nullable ones may be cleared."""
        columns = self.model.__table__.columns
        return {k: v for k, v in data.items() if v is not None or columns[k].nullable}

    async def list(self, session: AsyncSession, *filters, order_by=None, limit: Optional[int] = None) -> List[Any]:
        stmt = select(self.model).where(*filters).order_by(*(order_by or self.order_by))
        if limit:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, session: AsyncSession, row_id: int, *filters) -> Optional[Any]:
        stmt = select(self.model).where(self.model.id == row_id, *filters)
        result = await session.execute(stmt)
        return result.scalars().first()

    async def create(self, session: AsyncSession, data: Dict[str, Any]) -> Any:
        row = self.model(**data)
        session.add(row)
        await session.commit()
        logger.info("Created %s #%s", self.name, row.id)
        return row

    async def update(self, session: AsyncSession, row_id: int, data: Dict[str, Any]) -> bool:
        if not data:
            return await self.get(session, row_id) is not None
        result = await session.execute(
            update(self.model).where(self.model.id == row_id).values(**data)
        )
        await session.commit()
        return result.rowcount > 0

    async def delete(self, session: AsyncSession, row_id: int) -> bool:
        result = await session.execute(delete(self.model).where(self.model.id == row_id))
        await session.commit()
        if result.rowcount:
            logger.info("Deleted %s #%s", self.name, row_id)
        return result.rowcount > 0
