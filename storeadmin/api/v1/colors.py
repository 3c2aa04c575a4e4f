"""Color CRUD endpoints, scoped to a store."""

from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select

from storeadmin.api.v1.utils import ERROR_RESPONSES, ensure_not_referenced, get_store_record
from storeadmin.core.deps import CurrentUser, DBSession, get_active_store, get_store_for_user
from storeadmin.models.color import Color
from storeadmin.models.product import Product
from storeadmin.schemas.color import ColorCreate, ColorResponse, ColorUpdate
from storeadmin.schemas.common import ListResponse

router = APIRouter(responses=ERROR_RESPONSES)


@router.get("", response_model=ListResponse[ColorResponse], summary="List colors")
async def list_colors(store_id: UUID, db: DBSession) -> ListResponse[ColorResponse]:
    """List a store's colors, newest first. Public."""
    await get_active_store(store_id, db)

    query = select(Color).where(Color.store_id == store_id).order_by(Color.created_at.desc())
    result = await db.execute(query)
    colors = list(result.scalars().all())

    return ListResponse[ColorResponse](
        items=[ColorResponse.model_validate(c) for c in colors],
        total=len(colors),
    )


@router.get("/{color_id}", response_model=ColorResponse, summary="Get color")
async def get_color(store_id: UUID, color_id: UUID, db: DBSession) -> ColorResponse:
    await get_active_store(store_id, db)
    color = await get_store_record(db, Color, store_id, color_id)
    return ColorResponse.model_validate(color)


@router.post(
    "",
    response_model=ColorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create color",
)
async def create_color(
    store_id: UUID,
    data: ColorCreate,
    user: CurrentUser,
    db: DBSession,
) -> ColorResponse:
    await get_store_for_user(store_id, user, db)

    color = Color(store_id=store_id, name=data.name, value=data.value)
    db.add(color)
    await db.commit()
    await db.refresh(color)

    return ColorResponse.model_validate(color)


@router.patch("/{color_id}", response_model=ColorResponse, summary="Update color")
async def update_color(
    store_id: UUID,
    color_id: UUID,
    data: ColorUpdate,
    user: CurrentUser,
    db: DBSession,
) -> ColorResponse:
    await get_store_for_user(store_id, user, db)
    color = await get_store_record(db, Color, store_id, color_id)

    for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(color, field, value)

    await db.commit()
    await db.refresh(color)

    return ColorResponse.model_validate(color)


@router.delete("/{color_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete color")
async def delete_color(
    store_id: UUID,
    color_id: UUID,
    user: CurrentUser,
    db: DBSession,
) -> None:
    """Delete a color. Fails with 409 while any product uses it."""
    await get_store_for_user(store_id, user, db)
    color = await get_store_record(db, Color, store_id, color_id)

    await ensure_not_referenced(
        db,
        Product.color_id,
        color.id,
        "Remove all products using this color first",
    )

    await db.delete(color)
    await db.commit()
