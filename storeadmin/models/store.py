"""Store model: the tenant that owns every catalog and order row."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storeadmin.models.base import Base

if TYPE_CHECKING:
    from storeadmin.models.billboard import Billboard
    from storeadmin.models.category import Category
    from storeadmin.models.color import Color
    from storeadmin.models.order import Order
    from storeadmin.models.product import Product
    from storeadmin.models.size import Size


class Store(Base):
    """A single storefront owned by one user.

    Billboards, categories, sizes, colors, products and orders are all scoped
    to a store. Stores are soft-deleted through ``is_active`` so their
    children and order history stay intact.
    """

    __tablename__ = "stores"

    # Subject id issued by the identity provider
    user_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )

    # Relationships (no ORM cascades: children are removed explicitly)
    billboards: Mapped[list["Billboard"]] = relationship(
        "Billboard",
        back_populates="store",
        passive_deletes="all",
    )
    categories: Mapped[list["Category"]] = relationship(
        "Category",
        back_populates="store",
        passive_deletes="all",
    )
    sizes: Mapped[list["Size"]] = relationship(
        "Size",
        back_populates="store",
        passive_deletes="all",
    )
    colors: Mapped[list["Color"]] = relationship(
        "Color",
        back_populates="store",
        passive_deletes="all",
    )
    products: Mapped[list["Product"]] = relationship(
        "Product",
        back_populates="store",
        passive_deletes="all",
    )
    orders: Mapped[list["Order"]] = relationship(
        "Order",
        back_populates="store",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        return f"<Store {self.name}>"
