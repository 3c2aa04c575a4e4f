"""Product CRUD endpoints, scoped to a store."""

from uuid import UUID

from fastapi import APIRouter, Query, status
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from storeadmin.api.v1.utils import (
    ERROR_RESPONSES,
    ensure_not_referenced,
    get_store_record,
    require_store_reference,
)
from storeadmin.core.deps import (
    CurrentUser,
    DBSession,
    RedisClient,
    get_active_store,
    get_store_for_user,
)
from storeadmin.models.category import Category
from storeadmin.models.color import Color
from storeadmin.models.order import OrderItem
from storeadmin.models.product import Image, Product
from storeadmin.models.size import Size
from storeadmin.schemas.common import ListResponse
from storeadmin.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from storeadmin.services.dashboard_service import invalidate_dashboard_cache

router = APIRouter(responses=ERROR_RESPONSES)

_WITH_RELATIONS = (
    selectinload(Product.images),
    selectinload(Product.category),
    selectinload(Product.size),
    selectinload(Product.color),
)

# Foreign ids a product may carry, with the model each must resolve to in the same store
_REFERENCES = (
    ("category_id", Category, "Category"),
    ("size_id", Size, "Size"),
    ("color_id", Color, "Color"),
)


@router.get(
    "",
    response_model=ListResponse[ProductResponse],
    summary="List products",
    description="Storefront product listing. Archived products are hidden unless requested.",
)
async def list_products(
    store_id: UUID,
    db: DBSession,
    category_id: UUID | None = Query(None),
    color_id: UUID | None = Query(None),
    size_id: UUID | None = Query(None),
    is_featured: bool | None = Query(None),
    include_archived: bool = Query(False),
) -> ListResponse[ProductResponse]:
    await get_active_store(store_id, db)

    query = select(Product).where(Product.store_id == store_id)
    if category_id is not None:
        query = query.where(Product.category_id == category_id)
    if color_id is not None:
        query = query.where(Product.color_id == color_id)
    if size_id is not None:
        query = query.where(Product.size_id == size_id)
    if is_featured is not None:
        query = query.where(Product.is_featured == is_featured)
    if not include_archived:
        query = query.where(Product.is_archived == False)  # noqa: E712

    query = query.options(*_WITH_RELATIONS).order_by(Product.created_at.desc())
    result = await db.execute(query)
    products = list(result.scalars().all())

    return ListResponse[ProductResponse](
        items=[ProductResponse.model_validate(p) for p in products],
        total=len(products),
    )


@router.get("/{product_id}", response_model=ProductResponse, summary="Get product")
async def get_product(store_id: UUID, product_id: UUID, db: DBSession) -> ProductResponse:
    await get_active_store(store_id, db)
    product = await get_store_record(db, Product, store_id, product_id, options=_WITH_RELATIONS)
    return ProductResponse.model_validate(product)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
)
async def create_product(
    store_id: UUID,
    data: ProductCreate,
    user: CurrentUser,
    db: DBSession,
    redis: RedisClient,
) -> ProductResponse:
    await get_store_for_user(store_id, user, db)
    for field, model, label in _REFERENCES:
        await require_store_reference(db, model, store_id, getattr(data, field), label)

    product = Product(
        store_id=store_id,
        name=data.name,
        price=data.price,
        category_id=data.category_id,
        size_id=data.size_id,
        color_id=data.color_id,
        is_featured=data.is_featured,
        is_archived=data.is_archived,
        images=[Image(url=image.url) for image in data.images],
    )
    db.add(product)
    await db.commit()
    await invalidate_dashboard_cache(redis, store_id)

    product = await get_store_record(db, Product, store_id, product.id, options=_WITH_RELATIONS)
    return ProductResponse.model_validate(product)


@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Update product",
    description="Partial update. Supplying `images` replaces the product's image set.",
)
async def update_product(
    store_id: UUID,
    product_id: UUID,
    data: ProductUpdate,
    user: CurrentUser,
    db: DBSession,
    redis: RedisClient,
) -> ProductResponse:
    await get_store_for_user(store_id, user, db)
    product = await get_store_record(
        db, Product, store_id, product_id, options=(selectinload(Product.images),)
    )

    update_data = data.model_dump(exclude_unset=True, exclude_none=True)
    for field, model, label in _REFERENCES:
        if field in update_data:
            await require_store_reference(db, model, store_id, update_data[field], label)

    images = update_data.pop("images", None)
    if images is not None:
        product.images = [Image(url=image["url"]) for image in images]

    for field, value in update_data.items():
        setattr(product, field, value)

    await db.commit()
    await invalidate_dashboard_cache(redis, store_id)

    product = await get_store_record(db, Product, store_id, product_id, options=_WITH_RELATIONS)
    return ProductResponse.model_validate(product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete product",
    description="Fails with 409 once the product appears on an order; archive it instead.",
)
async def delete_product(
    store_id: UUID,
    product_id: UUID,
    user: CurrentUser,
    db: DBSession,
    redis: RedisClient,
) -> None:
    await get_store_for_user(store_id, user, db)
    product = await get_store_record(
        db, Product, store_id, product_id, options=(selectinload(Product.images),)
    )

    await ensure_not_referenced(
        db,
        OrderItem.product_id,
        product.id,
        "Product is part of existing orders; archive it instead",
    )

    await db.delete(product)
    await db.commit()
    await invalidate_dashboard_cache(redis, store_id)
