"""Storefront checkout: unpaid order plus a hosted payment session."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storeadmin.core.config import settings
from storeadmin.integrations.stripe.client import StripeClient, StripeError, build_line_item
from storeadmin.models.order import Order, OrderItem
from storeadmin.models.product import Product

logger = logging.getLogger(__name__)


class ProductsUnavailableError(Exception):
    """Some requested products are not for sale in this store."""

    def __init__(self, product_ids: list[UUID]) -> None:
        super().__init__(f"Products unavailable: {', '.join(str(p) for p in product_ids)}")
        self.product_ids = product_ids


class CheckoutService:
    """Creates orders for storefront carts and hands payment off to Stripe."""

    def __init__(self, db: AsyncSession, stripe: StripeClient) -> None:
        self.db = db
        self.stripe = stripe

    async def create_checkout(self, store_id: UUID, product_ids: list[UUID]) -> str:
        """Create an unpaid order for the cart and return the payment page URL.

        The order is committed before the session is requested. If Stripe
        fails, the unpaid order remains and the error propagates.

        Raises:
            ProductsUnavailableError: If any id is not an active product of the store.
            StripeError: If the checkout session cannot be created.
        """
        products = await self._get_available_products(store_id, product_ids)

        order = Order(
            store_id=store_id,
            is_paid=False,
            order_items=[OrderItem(product_id=product_id) for product_id in product_ids],
        )
        self.db.add(order)
        await self.db.commit()

        line_items = [
            build_line_item(products[pid].name, products[pid].price) for pid in product_ids
        ]
        try:
            session = await self.stripe.create_checkout_session(
                line_items=line_items,
                success_url=f"{settings.frontend_store_url}/cart?success=1",
                cancel_url=f"{settings.frontend_store_url}/cart?canceled=1",
                metadata={"order_id": str(order.id)},
            )
        except StripeError:
            logger.exception("Checkout session failed for order %s", order.id)
            raise

        logger.info("Checkout session %s created for order %s", session.get("id"), order.id)
        return str(session["url"])

    async def _get_available_products(
        self, store_id: UUID, product_ids: list[UUID]
    ) -> dict[UUID, Product]:
        stmt = select(Product).where(
            Product.store_id == store_id,
            Product.id.in_(set(product_ids)),
            Product.is_archived == False,  # noqa: E712
        )
        result = await self.db.execute(stmt)
        products = {product.id: product for product in result.scalars().all()}

        missing = [pid for pid in dict.fromkeys(product_ids) if pid not in products]
        if missing:
            raise ProductsUnavailableError(missing)
        return products
