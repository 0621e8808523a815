# app/routes/crud_router.py
from typing import Callable, List, Optional, Type

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CrudAccessor
from app.middleware.rbac import is_admin
from app.schemas.base import IdResponse, SuccessResponse
from sustainhub.core.error_messages import ErrorResponses
from sustainhub.db.database import get_session


def build_admin_crud_router(
    accessor: CrudAccessor,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    out_schema: Type[BaseModel],
    label: str,
    tags: List[str],
    prepare: Optional[Callable[[dict], dict]] = None,
) -> APIRouter:
    """Admin list/get/create/update/delete routes for one table.

    ``label`` names the entity in error messages ("product", "blog post").
    ``prepare`` converts validated input into column values.
    """
    router = APIRouter(tags=tags, dependencies=[Depends(is_admin)])
    prepare = prepare or (lambda data: data)

    @router.get("/", response_model=List[out_schema])
    async def list_rows(session: AsyncSession = Depends(get_session)):
        return await accessor.list(session)

    @router.get("/{row_id}", response_model=out_schema)
    async def get_row(row_id: int, session: AsyncSession = Depends(get_session)):
        row = await accessor.get(session, row_id)
        if not row:
            raise ErrorResponses.not_found(label.capitalize())
        return row

    @router.post("/", response_model=IdResponse)
    async def create_row(data: create_schema, session: AsyncSession = Depends(get_session)):
        row = await accessor.create(session, prepare(data.model_dump()))
        return {"success": True, "id": row.id}

    @router.patch("/{row_id}", response_model=SuccessResponse)
    async def update_row(row_id: int, data: update_schema, session: AsyncSession = Depends(get_session)):
        changes = accessor.writable(data.model_dump(exclude_unset=True))
        success = await accessor.update(session, row_id, prepare(changes))
        if not success:
            raise ErrorResponses.internal(f"Failed to update {label}")
        return {"success": True}

    @router.delete("/{row_id}", response_model=SuccessResponse)
    async def delete_row(row_id: int, session: AsyncSession = Depends(get_session)):
        success = await accessor.delete(session, row_id)
        if not success:
            raise ErrorResponses.internal(f"Failed to delete {label}")
        return {"success": True}

    return router
