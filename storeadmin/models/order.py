"""Order and order item models."""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storeadmin.models.base import Base

if TYPE_CHECKING:
    from storeadmin.models.product import Product
    from storeadmin.models.store import Store


class Order(Base):
    """A storefront order.

    Created unpaid at checkout; ``is_paid``, ``phone`` and ``address`` are
    filled in when the payment provider confirms the checkout session.
    """

    __tablename__ = "orders"

    store_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("stores.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    is_paid: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    phone: Mapped[str] = mapped_column(String(64), default="", nullable=False)
    address: Mapped[str] = mapped_column(Text, default="", nullable=False)

    store: Mapped["Store"] = relationship("Store", back_populates="orders")
    order_items: Mapped[list["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index("ix_orders_store_paid", "store_id", "is_paid"),
    )

    def __repr__(self) -> str:
        return f"<Order {self.id} paid={self.is_paid}>"


class OrderItem(Base):
    """One product line of an order (quantity is always one)."""

    __tablename__ = "order_items"

    order_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("products.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    order: Mapped["Order"] = relationship("Order", back_populates="order_items")
    product: Mapped["Product"] = relationship("Product", back_populates="order_items")

    def __repr__(self) -> str:
        return f"<OrderItem order={self.order_id} product={self.product_id}>"
