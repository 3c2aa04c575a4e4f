"""Category CRUD endpoints, scoped to a store."""

from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from storeadmin.api.v1.utils import (
    ERROR_RESPONSES,
    ensure_not_referenced,
    get_store_record,
    require_store_reference,
)
from storeadmin.core.deps import CurrentUser, DBSession, get_active_store, get_store_for_user
from storeadmin.models.billboard import Billboard
from storeadmin.models.category import Category
from storeadmin.models.product import Product
from storeadmin.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from storeadmin.schemas.common import ListResponse

router = APIRouter(responses=ERROR_RESPONSES)

_WITH_BILLBOARD = (selectinload(Category.billboard),)


@router.get("", response_model=ListResponse[CategoryResponse], summary="List categories")
async def list_categories(store_id: UUID, db: DBSession) -> ListResponse[CategoryResponse]:
    """List a store's categories with their billboards. Public."""
    await get_active_store(store_id, db)

    query = (
        select(Category)
        .where(Category.store_id == store_id)
        .options(*_WITH_BILLBOARD)
        .order_by(Category.created_at.desc())
    )
    result = await db.execute(query)
    categories = list(result.scalars().all())

    return ListResponse[CategoryResponse](
        items=[CategoryResponse.model_validate(c) for c in categories],
        total=len(categories),
    )


@router.get("/{category_id}", response_model=CategoryResponse, summary="Get category")
async def get_category(store_id: UUID, category_id: UUID, db: DBSession) -> CategoryResponse:
    await get_active_store(store_id, db)
    category = await get_store_record(db, Category, store_id, category_id, options=_WITH_BILLBOARD)
    return CategoryResponse.model_validate(category)


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
)
async def create_category(
    store_id: UUID,
    data: CategoryCreate,
    user: CurrentUser,
    db: DBSession,
) -> CategoryResponse:
    await get_store_for_user(store_id, user, db)
    await require_store_reference(db, Billboard, store_id, data.billboard_id, "Billboard")

    category = Category(store_id=store_id, name=data.name, billboard_id=data.billboard_id)
    db.add(category)
    await db.commit()

    category = await get_store_record(db, Category, store_id, category.id, options=_WITH_BILLBOARD)
    return CategoryResponse.model_validate(category)


@router.patch("/{category_id}", response_model=CategoryResponse, summary="Update category")
async def update_category(
    store_id: UUID,
    category_id: UUID,
    data: CategoryUpdate,
    user: CurrentUser,
    db: DBSession,
) -> CategoryResponse:
    await get_store_for_user(store_id, user, db)
    category = await get_store_record(db, Category, store_id, category_id)

    update_data = data.model_dump(exclude_unset=True, exclude_none=True)
    if "billboard_id" in update_data:
        await require_store_reference(
            db, Billboard, store_id, update_data["billboard_id"], "Billboard"
        )

    for field, value in update_data.items():
        setattr(category, field, value)
    await db.commit()

    category = await get_store_record(db, Category, store_id, category_id, options=_WITH_BILLBOARD)
    return CategoryResponse.model_validate(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete category",
    description="Fails with 409 while any product is in the category.",
)
async def delete_category(
    store_id: UUID,
    category_id: UUID,
    user: CurrentUser,
    db: DBSession,
) -> None:
    await get_store_for_user(store_id, user, db)
    category = await get_store_record(db, Category, store_id, category_id)

    await ensure_not_referenced(
        db,
        Product.category_id,
        category.id,
        "Remove all products in this category first",
    )

    await db.delete(category)
    await db.commit()
