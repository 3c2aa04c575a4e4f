"""Category model."""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storeadmin.models.base import Base

if TYPE_CHECKING:
    from storeadmin.models.billboard import Billboard
    from storeadmin.models.product import Product
    from storeadmin.models.store import Store


class Category(Base):
    """Product category, displayed under one billboard on the storefront."""

    __tablename__ = "categories"

    store_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("stores.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    billboard_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("billboards.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    store: Mapped["Store"] = relationship("Store", back_populates="categories")
    billboard: Mapped["Billboard"] = relationship("Billboard", back_populates="categories")
    products: Mapped[list["Product"]] = relationship(
        "Product",
        back_populates="category",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        return f"<Category {self.name}>"
