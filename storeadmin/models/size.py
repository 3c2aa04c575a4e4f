"""Size model."""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storeadmin.models.base import Base

if TYPE_CHECKING:
    from storeadmin.models.product import Product
    from storeadmin.models.store import Store


class Size(Base):
    """A size option, e.g. name "Large" with value "L"."""

    __tablename__ = "sizes"

    store_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("stores.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[str] = mapped_column(String(255), nullable=False)

    store: Mapped["Store"] = relationship("Store", back_populates="sizes")
    products: Mapped[list["Product"]] = relationship(
        "Product",
        back_populates="size",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        return f"<Size {self.name} ({self.value})>"
