"""Order listing for the store dashboard."""

from uuid import UUID

from fastapi import APIRouter

from storeadmin.api.v1.utils import ERROR_RESPONSES
from storeadmin.core.deps import CurrentUser, DBSession, get_store_for_user
from storeadmin.schemas.common import ListResponse
from storeadmin.schemas.order import OrderRow
from storeadmin.services.order_service import OrderService

router = APIRouter(responses=ERROR_RESPONSES)


@router.get("", response_model=ListResponse[OrderRow], summary="List orders")
async def list_orders(store_id: UUID, user: CurrentUser, db: DBSession) -> ListResponse[OrderRow]:
    """List a store's orders, newest first, with product names and totals."""
    await get_store_for_user(store_id, user, db)
    rows = await OrderService(db).list_rows(store_id)
    return ListResponse[OrderRow](items=rows, total=len(rows))
