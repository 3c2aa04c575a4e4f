"""Dashboard overview endpoint."""

from uuid import UUID

from fastapi import APIRouter, Query

from storeadmin.api.v1.utils import ERROR_RESPONSES
from storeadmin.core.deps import CurrentUser, DBSession, RedisClient, get_store_for_user
from storeadmin.schemas.dashboard import DashboardOverview
from storeadmin.services.dashboard_service import DashboardService

router = APIRouter(responses=ERROR_RESPONSES)


@router.get("", response_model=DashboardOverview, summary="Store overview")
async def get_dashboard(
    store_id: UUID,
    user: CurrentUser,
    db: DBSession,
    redis: RedisClient,
    year: int | None = Query(None, ge=1970, le=9999, description="Restrict to one year"),
) -> DashboardOverview:
    """Revenue, sales count, stock count and revenue per month for a store."""
    await get_store_for_user(store_id, user, db)
    return await DashboardService(db, redis).get_overview(store_id, year)
