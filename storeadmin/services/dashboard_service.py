"""Dashboard figures folded from a store's paid orders."""

import logging
from collections.abc import Iterable
from decimal import Decimal
from uuid import UUID

import redis.asyncio as aioredis
from sqlalchemy import extract, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storeadmin.core.config import settings
from storeadmin.models.order import Order, OrderItem
from storeadmin.models.product import Product
from storeadmin.schemas.dashboard import DashboardOverview, GraphPoint

logger = logging.getLogger(__name__)

MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

CACHE_KEY_PREFIX = "dashboard"


def order_total(order: Order) -> Decimal:
    """Sum of the current prices of the products on an order."""
    return sum((item.product.price for item in order.order_items), Decimal("0"))


def total_revenue(orders: Iterable[Order]) -> Decimal:
    return sum((order_total(order) for order in orders), Decimal("0"))


def revenue_by_month(orders: Iterable[Order]) -> list[GraphPoint]:
    """Fold orders into twelve calendar-month buckets, January first.

    Orders from different years land in the same bucket; callers filter by
    year beforehand when they need a single year.
    """
    totals = [Decimal("0")] * 12
    for order in orders:
        totals[order.created_at.month - 1] += order_total(order)

    return [GraphPoint(name=name, total=total) for name, total in zip(MONTH_NAMES, totals)]


def _cache_key(store_id: UUID, year: int | None) -> str:
    return f"{CACHE_KEY_PREFIX}:{store_id}:{year if year is not None else 'all'}"


async def invalidate_dashboard_cache(redis: aioredis.Redis, store_id: UUID) -> None:
    """Drop every cached overview for a store."""
    keys = [key async for key in redis.scan_iter(match=f"{CACHE_KEY_PREFIX}:{store_id}:*")]
    if keys:
        await redis.delete(*keys)


class DashboardService:
    """Builds the store overview shown on the dashboard home page."""

    def __init__(self, db: AsyncSession, redis: aioredis.Redis) -> None:
        self.db = db
        self.redis = redis

    async def get_overview(self, store_id: UUID, year: int | None = None) -> DashboardOverview:
        cache_key = _cache_key(store_id, year)
        cached = await self.redis.get(cache_key)
        if cached:
            return DashboardOverview.model_validate_json(cached)

        paid_orders = await self._get_paid_orders(store_id, year)

        overview = DashboardOverview(
            total_revenue=total_revenue(paid_orders),
            sales_count=len(paid_orders),
            stock_count=await self.get_stock_count(store_id),
            revenue_by_month=revenue_by_month(paid_orders),
        )

        await self.redis.set(
            cache_key,
            overview.model_dump_json(),
            ex=settings.dashboard_cache_ttl,
        )
        return overview

    async def get_stock_count(self, store_id: UUID) -> int:
        """Number of products still for sale (not archived)."""
        stmt = (
            select(func.count())
            .select_from(Product)
            .where(Product.store_id == store_id, Product.is_archived == False)  # noqa: E712
        )
        return (await self.db.execute(stmt)).scalar() or 0

    async def _get_paid_orders(self, store_id: UUID, year: int | None) -> list[Order]:
        stmt = (
            select(Order)
            .where(Order.store_id == store_id, Order.is_paid == True)  # noqa: E712
            .options(selectinload(Order.order_items).selectinload(OrderItem.product))
        )
        if year is not None:
            stmt = stmt.where(extract("year", Order.created_at) == year)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())
