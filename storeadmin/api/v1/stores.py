"""Store CRUD endpoints for the authenticated owner."""

from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select

from storeadmin.api.v1.utils import ERROR_RESPONSES
from storeadmin.core.auth import get_user_id
from storeadmin.core.deps import CurrentUser, DBSession, get_store_for_user
from storeadmin.models.store import Store
from storeadmin.schemas.common import ListResponse
from storeadmin.schemas.store import StoreCreate, StoreResponse, StoreUpdate

router = APIRouter(responses=ERROR_RESPONSES)


@router.get(
    "",
    response_model=ListResponse[StoreResponse],
    summary="List stores",
    description="List the authenticated user's active stores, newest first.",
)
async def list_stores(user: CurrentUser, db: DBSession) -> ListResponse[StoreResponse]:
    query = (
        select(Store)
        .where(
            Store.user_id == get_user_id(user),
            Store.is_active == True,  # noqa: E712
        )
        .order_by(Store.created_at.desc())
    )
    result = await db.execute(query)
    stores = list(result.scalars().all())

    return ListResponse[StoreResponse](
        items=[StoreResponse.model_validate(store) for store in stores],
        total=len(stores),
    )


@router.post(
    "",
    response_model=StoreResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create store",
)
async def create_store(data: StoreCreate, user: CurrentUser, db: DBSession) -> StoreResponse:
    """Create a new store owned by the caller."""
    store = Store(user_id=get_user_id(user), name=data.name)
    db.add(store)
    await db.commit()
    await db.refresh(store)

    return StoreResponse.model_validate(store)


@router.get("/{store_id}", response_model=StoreResponse, summary="Get store")
async def get_store(store_id: UUID, user: CurrentUser, db: DBSession) -> StoreResponse:
    store = await get_store_for_user(store_id, user, db)
    return StoreResponse.model_validate(store)


@router.patch("/{store_id}", response_model=StoreResponse, summary="Rename store")
async def update_store(
    store_id: UUID,
    data: StoreUpdate,
    user: CurrentUser,
    db: DBSession,
) -> StoreResponse:
    store = await get_store_for_user(store_id, user, db)

    store.name = data.name
    await db.commit()
    await db.refresh(store)

    return StoreResponse.model_validate(store)


@router.delete(
    "/{store_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete store",
    description="Soft delete: the store and everything in it become invisible.",
)
async def delete_store(store_id: UUID, user: CurrentUser, db: DBSession) -> None:
    store = await get_store_for_user(store_id, user, db)

    store.is_active = False
    await db.commit()
