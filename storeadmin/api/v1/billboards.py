"""Billboard CRUD endpoints, scoped to a store."""

from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select

from storeadmin.api.v1.utils import ERROR_RESPONSES, ensure_not_referenced, get_store_record
from storeadmin.core.deps import CurrentUser, DBSession, get_active_store, get_store_for_user
from storeadmin.models.billboard import Billboard
from storeadmin.models.category import Category
from storeadmin.schemas.billboard import BillboardCreate, BillboardResponse, BillboardUpdate
from storeadmin.schemas.common import ListResponse

router = APIRouter(responses=ERROR_RESPONSES)


@router.get(
    "",
    response_model=ListResponse[BillboardResponse],
    summary="List billboards",
)
async def list_billboards(store_id: UUID, db: DBSession) -> ListResponse[BillboardResponse]:
    """List a store's billboards, newest first. Public."""
    await get_active_store(store_id, db)

    query = (
        select(Billboard)
        .where(Billboard.store_id == store_id)
        .order_by(Billboard.created_at.desc())
    )
    result = await db.execute(query)
    billboards = list(result.scalars().all())

    return ListResponse[BillboardResponse](
        items=[BillboardResponse.model_validate(b) for b in billboards],
        total=len(billboards),
    )


@router.get("/{billboard_id}", response_model=BillboardResponse, summary="Get billboard")
async def get_billboard(store_id: UUID, billboard_id: UUID, db: DBSession) -> BillboardResponse:
    await get_active_store(store_id, db)
    billboard = await get_store_record(db, Billboard, store_id, billboard_id)
    return BillboardResponse.model_validate(billboard)


@router.post(
    "",
    response_model=BillboardResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create billboard",
)
async def create_billboard(
    store_id: UUID,
    data: BillboardCreate,
    user: CurrentUser,
    db: DBSession,
) -> BillboardResponse:
    await get_store_for_user(store_id, user, db)

    billboard = Billboard(store_id=store_id, label=data.label, image_url=data.image_url)
    db.add(billboard)
    await db.commit()
    await db.refresh(billboard)

    return BillboardResponse.model_validate(billboard)


@router.patch("/{billboard_id}", response_model=BillboardResponse, summary="Update billboard")
async def update_billboard(
    store_id: UUID,
    billboard_id: UUID,
    data: BillboardUpdate,
    user: CurrentUser,
    db: DBSession,
) -> BillboardResponse:
    await get_store_for_user(store_id, user, db)
    billboard = await get_store_record(db, Billboard, store_id, billboard_id)

    for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(billboard, field, value)

    await db.commit()
    await db.refresh(billboard)

    return BillboardResponse.model_validate(billboard)


@router.delete(
    "/{billboard_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete billboard",
    description="Fails with 409 while any category still uses the billboard.",
)
async def delete_billboard(
    store_id: UUID,
    billboard_id: UUID,
    user: CurrentUser,
    db: DBSession,
) -> None:
    await get_store_for_user(store_id, user, db)
    billboard = await get_store_record(db, Billboard, store_id, billboard_id)

    await ensure_not_referenced(
        db,
        Category.billboard_id,
        billboard.id,
        "Remove all categories using this billboard first",
    )

    await db.delete(billboard)
    await db.commit()
