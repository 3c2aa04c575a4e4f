"""Size CRUD endpoints, scoped to a store."""

from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select

from storeadmin.api.v1.utils import ERROR_RESPONSES, ensure_not_referenced, get_store_record
from storeadmin.core.deps import CurrentUser, DBSession, get_active_store, get_store_for_user
from storeadmin.models.product import Product
from storeadmin.models.size import Size
from storeadmin.schemas.common import ListResponse
from storeadmin.schemas.size import SizeCreate, SizeResponse, SizeUpdate

router = APIRouter(responses=ERROR_RESPONSES)


@router.get("", response_model=ListResponse[SizeResponse], summary="List sizes")
async def list_sizes(store_id: UUID, db: DBSession) -> ListResponse[SizeResponse]:
    await get_active_store(store_id, db)

    query = select(Size).where(Size.store_id == store_id).order_by(Size.created_at.desc())
    result = await db.execute(query)
    sizes = list(result.scalars().all())

    return ListResponse[SizeResponse](
        items=[SizeResponse.model_validate(s) for s in sizes],
        total=len(sizes),
    )


@router.get("/{size_id}", response_model=SizeResponse, summary="Get size")
async def get_size(store_id: UUID, size_id: UUID, db: DBSession) -> SizeResponse:
    await get_active_store(store_id, db)
    size = await get_store_record(db, Size, store_id, size_id)
    return SizeResponse.model_validate(size)


@router.post(
    "",
    response_model=SizeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create size",
)
async def create_size(
    store_id: UUID,
    data: SizeCreate,
    user: CurrentUser,
    db: DBSession,
) -> SizeResponse:
    await get_store_for_user(store_id, user, db)

    size = Size(store_id=store_id, name=data.name, value=data.value)
    db.add(size)
    await db.commit()
    await db.refresh(size)

    return SizeResponse.model_validate(size)


@router.patch("/{size_id}", response_model=SizeResponse, summary="Update size")
async def update_size(
    store_id: UUID,
    size_id: UUID,
    data: SizeUpdate,
    user: CurrentUser,
    db: DBSession,
) -> SizeResponse:
    await get_store_for_user(store_id, user, db)
    size = await get_store_record(db, Size, store_id, size_id)

    for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(size, field, value)

    await db.commit()
    await db.refresh(size)

    return SizeResponse.model_validate(size)


@router.delete("/{size_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete size")
async def delete_size(
    store_id: UUID,
    size_id: UUID,
    user: CurrentUser,
    db: DBSession,
) -> None:
    """Delete a size. Fails with 409 while any product uses it."""
    await get_store_for_user(store_id, user, db)
    size = await get_store_record(db, Size, store_id, size_id)

    await ensure_not_referenced(
        db,
        Product.size_id,
        size.id,
        "Remove all products using this size first",
    )

    await db.delete(size)
    await db.commit()
