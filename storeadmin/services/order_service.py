"""Order listing and the paid transition driven by the payment webhook."""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storeadmin.models.order import Order, OrderItem
from storeadmin.models.product import Product
from storeadmin.schemas.order import OrderRow
from storeadmin.services.dashboard_service import order_total

logger = logging.getLogger(__name__)

# Order in which address parts are joined into the single address string
ADDRESS_FIELDS = ("line1", "line2", "postal_code", "city", "state", "country")


def format_address(address: dict[str, Any] | None) -> str:
    """Join the non-empty parts of a postal address with ", "."""
    if not address:
        return ""
    return ", ".join(str(address[field]) for field in ADDRESS_FIELDS if address.get(field))


class OrderService:
    """Business logic for store orders."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_rows(self, store_id: UUID) -> list[OrderRow]:
        """Orders of a store, newest first, shaped for the orders table."""
        stmt = (
            select(Order)
            .where(Order.store_id == store_id)
            .options(selectinload(Order.order_items).selectinload(OrderItem.product))
            .order_by(Order.created_at.desc())
        )
        result = await self.db.execute(stmt)
        orders = result.scalars().all()

        return [
            OrderRow(
                id=order.id,
                phone=order.phone,
                address=order.address,
                is_paid=order.is_paid,
                products=", ".join(item.product.name for item in order.order_items),
                total_price=order_total(order),
                created_at=order.created_at,
            )
            for order in orders
        ]

    async def mark_paid(self, order_id: UUID, *, phone: str, address: str) -> Order | None:
        """Flip an unpaid order to paid and archive the products it sold.

        The update only matches unpaid orders, so a replayed webhook leaves
        the order and its products untouched.

        Returns:
            The updated order, or None if the order is unknown or already paid.
        """
        stmt = (
            update(Order)
            .where(Order.id == order_id, Order.is_paid == False)  # noqa: E712
            .values(is_paid=True, phone=phone, address=address)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount == 0:  # type: ignore[attr-defined]
            await self.db.rollback()
            logger.info("Order %s not found or already paid", order_id)
            return None

        order_stmt = (
            select(Order)
            .where(Order.id == order_id)
            .options(selectinload(Order.order_items))
            .execution_options(populate_existing=True)
        )
        order = (await self.db.execute(order_stmt)).scalar_one()

        product_ids = [item.product_id for item in order.order_items]
        if product_ids:
            await self.db.execute(
                update(Product)
                .where(Product.id.in_(product_ids))
                .values(is_archived=True)
                .execution_options(synchronize_session=False)
            )

        await self.db.commit()
        logger.info("Order %s marked paid, archived %d products", order_id, len(product_ids))
        return order
