"""Lookups shared by the store-scoped catalog routers."""

from typing import Any, TypeVar
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from storeadmin.models.base import Base
from storeadmin.schemas.common import ErrorResponse

ModelT = TypeVar("ModelT", bound=Base)

# Error bodies documented on the owner and store-scoped routers
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid input"},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse, "description": "Not signed in"},
    status.HTTP_403_FORBIDDEN: {"model": ErrorResponse, "description": "Store not owned"},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Not in this store"},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": "Still referenced"},
}


async def get_store_record(
    db: AsyncSession,
    model: type[ModelT],
    store_id: UUID,
    record_id: UUID,
    *,
    options: tuple[Any, ...] = (),
) -> ModelT:
    """Fetch a child record by id, only if it belongs to the given store."""
    stmt = select(model).where(
        model.id == record_id,
        model.store_id == store_id,  # type: ignore[attr-defined]
    )
    if options:
        stmt = stmt.options(*options)
    stmt = stmt.execution_options(populate_existing=True)
    record = (await db.execute(stmt)).scalar_one_or_none()

    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{model.__name__} not found",
        )
    return record


async def require_store_reference(
    db: AsyncSession,
    model: type[Base],
    store_id: UUID,
    record_id: UUID,
    field: str,
) -> None:
    """Reject a foreign id that does not point into the same store."""
    stmt = select(
        exists().where(
            model.id == record_id,
            model.store_id == store_id,  # type: ignore[attr-defined]
        )
    )
    if not (await db.execute(stmt)).scalar():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field} does not belong to this store",
        )


async def ensure_not_referenced(
    db: AsyncSession,
    column: InstrumentedAttribute[Any],
    record_id: UUID,
    detail: str,
) -> None:
    """Refuse to delete a row that other rows still point at."""
    stmt = select(exists().where(column == record_id))
    if (await db.execute(stmt)).scalar():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=detail)
