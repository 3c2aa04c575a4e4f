"""Color model."""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storeadmin.models.base import Base

if TYPE_CHECKING:
    from storeadmin.models.product import Product
    from storeadmin.models.store import Store


class Color(Base):
    """A color option; ``value`` is a hex code such as ``#ff0000``."""

    __tablename__ = "colors"

    store_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("stores.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[str] = mapped_column(String(9), nullable=False)

    store: Mapped["Store"] = relationship("Store", back_populates="colors")
    products: Mapped[list["Product"]] = relationship(
        "Product",
        back_populates="color",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        return f"<Color {self.name} ({self.value})>"
