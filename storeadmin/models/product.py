"""Product and product image models."""

import uuid
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Index, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storeadmin.models.base import Base

if TYPE_CHECKING:
    from storeadmin.models.category import Category
    from storeadmin.models.color import Color
    from storeadmin.models.order import OrderItem
    from storeadmin.models.size import Size
    from storeadmin.models.store import Store


class Product(Base):
    """A sellable product.

    Archived products stay in the database so order history keeps resolving,
    but they are hidden from the storefront and cannot be checked out.
    Products are archived automatically once an order containing them is paid.
    """

    __tablename__ = "products"

    store_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("stores.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    category_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    size_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("sizes.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    color_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("colors.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    store: Mapped["Store"] = relationship("Store", back_populates="products")
    category: Mapped["Category"] = relationship("Category", back_populates="products")
    size: Mapped["Size"] = relationship("Size", back_populates="products")
    color: Mapped["Color"] = relationship("Color", back_populates="products")
    images: Mapped[list["Image"]] = relationship(
        "Image",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="Image.created_at",
    )
    order_items: Mapped[list["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="product",
        passive_deletes="all",
    )

    __table_args__ = (
        Index("ix_products_store_archived", "store_id", "is_archived"),
    )

    def __repr__(self) -> str:
        return f"<Product {self.name} ({self.price})>"


class Image(Base):
    """Hosted image URL attached to a product."""

    __tablename__ = "images"

    product_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    url: Mapped[str] = mapped_column(Text, nullable=False)

    product: Mapped["Product"] = relationship("Product", back_populates="images")

    def __repr__(self) -> str:
        return f"<Image {self.url}>"
